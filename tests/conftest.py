def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")
