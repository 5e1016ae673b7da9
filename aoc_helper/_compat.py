import sys

if sys.version_info >= (3, 11):
    import tomllib as tomllib # import using same name to tell the type checker we intend to export this (so other modules can import it)
else:
    import tomli as tomllib # import using same name to tell the type checker we intend to export this (so other modules can import it)
