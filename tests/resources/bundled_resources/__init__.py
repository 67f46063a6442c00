"""Package holding bundled properties resources for tests."""
