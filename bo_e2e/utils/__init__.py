from . import helpers, test_context

__all__ = ["helpers", "test_context"]
