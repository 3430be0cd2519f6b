from functools import partial, partialmethod
import logging

# modified from netflow / MOSCOT: https://github.com/theislab/moscot/blob/main/src/moscot/_logging.py

__all__ = ["logger", "set_verbose"]

# Note: custom levels are registered once, on first import.

CUSTOM_LEVEL = logging.WARNING + 5
logging.MSG = CUSTOM_LEVEL
logging.addLevelName(logging.MSG, 'MSG')
logging.Logger.msg = partialmethod(logging.Logger.log, logging.MSG)
logging.msg = partial(logging.log, logging.MSG)

logging.TRACE = logging.DEBUG + 5
logging.addLevelName(logging.TRACE, 'TRACE')
logging.Logger.trace = partialmethod(logging.Logger.log, logging.TRACE)
logging.trace = partial(logging.log, logging.TRACE)

PACKAGE_LOGGER = 'branchflow'

VERBOSE_LEVELS = {
    "DEBUG": logging.DEBUG,
    "TRACE": logging.TRACE,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "MSG": logging.MSG,
    "ERROR": logging.ERROR,
}


def _gen_logger(name='') -> "logging.Logger":
    """ Return the named logger with a rich console handler attached.

    Module loggers below the package logger (``branchflow.<module>``) get no
    handler or level of their own and propagate to ``branchflow``, so
    ``set_verbose(branchflow.logger, ...)`` controls all of them.
    Calling this again for the same name returns the same logger without
    stacking a second handler.
    """
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger(name)
    if name.startswith(PACKAGE_LOGGER + '.'):
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        return logger

    logger.setLevel(logging.WARN)

    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return logger

    console = Console()
    ch = RichHandler(console=console,
                     show_level=False,
                     show_path=False,
                     show_time=False,
                     keywords=RichHandler.KEYWORDS + ['TRACE', 'MSG'],
                     )

    log_formatter = logging.Formatter(fmt="%(name)s: %(asctime)s | %(levelname)s | %(module)s:%(funcName)s:%(lineno)s | >>> %(message)s",
                                      datefmt='%m/%d/%Y %I:%M:%S  %p')
    ch.setFormatter(log_formatter)
    logger.addHandler(ch)

    # this prevents double outputs
    logger.propagate = False
    return logger


logger = _gen_logger(name=PACKAGE_LOGGER)


def set_verbose(logger, verbose="ERROR"):
    """ Set logger verbosity.

    Parameters
    ----------
    logger : `logging.Logger`
        Logger created by ``_gen_logger``.
    verbose: {"DEBUG", "TRACE", "INFO", "WARN", "MSG", "ERROR"}
        Verbose level. (Default = "ERROR")

        Options :

            - "DEBUG": show all output logs.
            - "TRACE": show per-edge decisions of the branch graph builder.
            - "INFO": show only process logs to confirm things are working as expected.
            - "WARN": show unexpected behavior, potential problem, critical message, or error logs.
            - "MSG": show critical message and error logs.
            - "ERROR": only show log if error happened.

    Returns
    -------
    level : `int`
        The numeric level that was applied.
    """
    if verbose in VERBOSE_LEVELS:
        level = VERBOSE_LEVELS[verbose]
    else:
        logger.error(f"Unrecognized verbose level, options: {list(VERBOSE_LEVELS)}, use 'ERROR' instead")
        level = logging.ERROR

    logger.setLevel(level)
    for handler in logger.handlers:
        if handler.level != level:
            handler.setLevel(level)
            logger.msg(f"Logging verbosity set to {level}.")
    return level
