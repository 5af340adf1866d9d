"""CodePoet: build Swift source files from composable specs."""

__version__ = "0.1.0"
