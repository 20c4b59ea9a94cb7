"""
cmdparams Test Suite
====================

Test Categories:
- Unit Tests: value kinds, registry, proxies, parser, ini codec, descriptor
- Integration Tests: the sample command-line tool end to end

Requirements:
- pytest >= 6.2.0
- NumPy >= 1.21.0
- PyYAML >= 5.4.0
"""
