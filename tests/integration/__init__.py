"""
Integration Tests for cmdparams
===============================

End-to-end runs of the sample tool:
- Declarations, command line and exit codes
- Ini persistence across registries
- Descriptor and help output
- Tool configuration files
"""
