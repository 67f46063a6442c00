"""Basic tests for the layered_config package."""


def test_import_layered_config():
    import layered_config

    assert layered_config.__version__ == "1.0.0"


def test_version_format():
    import layered_config

    parts = layered_config.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api_is_exported():
    import layered_config

    for name in layered_config.__all__:
        assert hasattr(layered_config, name), name
