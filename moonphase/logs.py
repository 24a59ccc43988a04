import sys
import logging

LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s: %(message)s'


class StderrHandler(logging.StreamHandler):
    """Defines a logging handler that keeps log records off stdout, which is reserved for the phase."""
    def __init__(self):
        super().__init__(stream=sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(debug=False):
    """ Log to stderr. Debug records only when asked for, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        handlers=[StderrHandler()],
        force=True,
    )
