import logging

def pytest_addoption(parser):
    parser.addoption("--logs", action="store_true",
        help="print debug logs")

def pytest_configure(config):
    if config.getoption('--logs', default=False):
        logging.getLogger().setLevel(logging.DEBUG)
