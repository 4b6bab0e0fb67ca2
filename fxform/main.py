import logging

from .core.config import Settings, get_settings
from .core.logging import init_logging
from .services.amount_parser import AmountParser
from .services.rates.table import RateTable, build_default_rate_table
from .viewmodels.main import MainViewModel


def create_view_model(
    settings_override: Settings | None = None, rates: RateTable | None = None
) -> MainViewModel:
    """View model factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug, fmt=settings.log_format)

    try:
        table = rates if rates is not None else build_default_rate_table()
    except ValueError:
        # A malformed compiled-in table is fatal; re-raise after logging
        logging.getLogger("fxform").exception("failed to build rate table")
        raise

    vm = MainViewModel(
        rates=table,
        settings=settings,
        parser=AmountParser(settings.number_format),
    )
    logging.getLogger("fxform").debug(
        "%s %s ready: currencies=%s", settings.app_name, settings.version, vm.currencies
    )
    return vm
