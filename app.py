import atexit
import logging

from flask import Flask

from api import EXTENSION_KEY, api
from errors import register_error_handlers
from run_controller import RunController
from settings import Settings, configure_logging
from storage import DashboardStore

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def create_app(settings=None, store=None, controller=None):
    """Build the dashboard app. Pass your own store/controller to isolate state."""
    settings = settings or Settings.from_env()

    flask_app = Flask(__name__)
    flask_app.config["VERSION"] = __version__
    flask_app.config["DEBUG"] = settings.debug
    flask_app.json.ensure_ascii = False

    if store is not None and controller is not None and controller.store is not store:
        raise ValueError("controller must be built on the store passed to create_app")
    if store is None:
        store = controller.store if controller is not None else DashboardStore(settings.initial_status)
    if controller is None:
        controller = RunController(store, completion_delay=settings.completion_delay)
        atexit.register(controller.shutdown)

    flask_app.extensions[EXTENSION_KEY] = {"store": store, "controller": controller, "settings": settings}
    flask_app.register_blueprint(api)
    register_error_handlers(flask_app)

    logger.info(
        "Dashboard ready (initial status=%s, completion delay=%.3fs)",
        store.get_run_status().value, controller.completion_delay,
    )
    return flask_app


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    create_app(settings).run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
