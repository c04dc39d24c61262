import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--catalog-file",
        action="store",
        default=None,
        help="run the catalog tests against this catalog file as well",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "external_catalog: tests that need --catalog-file")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--catalog-file"):
        skip_catalog = pytest.mark.skip(reason="need --catalog-file option to run")
        for item in items:
            if "external_catalog" in item.keywords:
                item.add_marker(skip_catalog)
