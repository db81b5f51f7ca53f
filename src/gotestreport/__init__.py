"""gotestreport - structured reports from `go test -v` output."""

__version__ = "0.1.0"
