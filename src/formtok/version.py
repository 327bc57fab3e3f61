from importlib.metadata import PackageNotFoundError, version

try:
    version = version("FormTok")
except PackageNotFoundError:
    version = "0.0.0"
