import logging

from contact_form.logging_config import setup_logging


def test_setup_logging_sets_package_level():
    logger = setup_logging(logging.DEBUG)

    assert logger.name == "contact_form"
    assert logger.level == logging.DEBUG
    assert logging.getLogger("contact_form.controller").isEnabledFor(logging.DEBUG)

    setup_logging(logging.WARNING)
    assert not logger.isEnabledFor(logging.INFO)
