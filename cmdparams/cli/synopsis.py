"""Help text (``--help``) generated from the registry."""

from __future__ import annotations

from cmdparams.core.registry import ParamRegistry
from cmdparams.core.values import ParamValue


def _option_usage(param: ParamValue) -> str | None:
    flag = param.tags.get("flag", "")
    longflag = param.tags.get("longflag", "")
    type_name = param.type_tag.value
    if flag and longflag:
        return f"[-{flag}|--{longflag} <{type_name}>]"
    if flag:
        return f"[-{flag} <{type_name}>]"
    if longflag:
        return f"[--{longflag} <{type_name}>]"
    return None


def _positional(registry: ParamRegistry) -> list[ParamValue]:
    indexed = [
        (int(param.tags["index"]), param)
        for _, _, param in registry.iter_params()
        if param.tags.get("index", "").isdigit()
    ]
    return [param for _, param in sorted(indexed, key=lambda item: item[0])]


def build_synopsis(registry: ParamRegistry) -> str:
    """Format a man-page style usage summary.

    Layout: a usage block with the built-in switches, one line per flagged
    parameter and the positional placeholders; then a verbose description
    of each section's options, of each positional argument, and finally the
    application description, author and acknowledgements.
    """
    title = registry.title
    indent = " " * (6 + len(title))
    positional = _positional(registry)

    lines = [
        "USAGE:",
        "",
        f"   ./{title} [-h] [--xml]",
        f"{indent}[--ctk-save-ini <file>] [--ctk-load-ini <file>]",
    ]
    for _, _, param in registry.iter_params():
        if "index" in param.tags:
            continue
        flag = param.tags.get("flag", "")
        if flag:
            lines.append(f"{indent}[-{flag} <{param.type_tag.value}>]")
        elif param.tags.get("longflag"):
            lines.append(f"{indent}[--{param.tags['longflag']} <{param.type_tag.value}>]")
    if positional:
        lines.append(indent + " ".join(f"<{p.type_tag.value}>" for p in positional))

    for section in registry.sections():
        lines.extend(["", "", f"{section}:", ""])
        for _, param in registry.params_in(section):
            usage = _option_usage(param)
            if usage is None:
                continue
            lines.append(f" {usage}")
            if param.tags.get("description"):
                lines.extend([f"    {param.tags['description']}", ""])

    for param in positional:
        lines.extend(["", "", f"{param.type_tag.value}({param.tags['index']}):"])
        lines.append(f"    {param.tags.get('description', '')}")

    if registry.description:
        lines.extend(["", "", registry.description, ""])
    if registry.contributor:
        lines.extend(["", "", f"Author: {registry.contributor}", ""])
    if registry.acknowledgements:
        lines.extend(["", "", f"Acknowledgements: {registry.acknowledgements}", ""])

    return "\n".join(lines) + "\n"
