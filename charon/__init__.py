"""Permission model, security context and expectation-based test doubles for service clients and servers."""

__version__ = "0.1.0"