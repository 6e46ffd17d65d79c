"""jsonnet-deps: compute the files a Jsonnet file depends on."""

__version__ = "0.1.0"
