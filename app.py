import importlib
import pkgutil

from flask import Blueprint, Flask

from config.settings import ExecutionMode, load_settings, parse_bool, parse_execution_mode
from repositories.views_repository import PostViewsRepository
from services.views_service import ViewCounterService


def create_app(config=None, store=None) -> Flask:
    """Flask application factory.

    ``config`` overrides the environment-derived settings; ``store`` replaces
    the MongoDB repository (tests pass an in-memory store).
    """
    app = Flask(__name__)
    app.config.update(load_settings())
    if config:
        app.config.update(config)

    """Registration of error handlers."""
    from middleware.handlers import register_error_handlers
    register_error_handlers(app)

    if store is None:
        store = PostViewsRepository(app.config["VIEWS_COLLECTION"])
    app.config["EXECUTION_MODE"] = parse_execution_mode(app.config["EXECUTION_MODE"])
    app.config["VIEWS_ATOMIC_INCREMENT"] = parse_bool(app.config["VIEWS_ATOMIC_INCREMENT"])
    development = app.config["EXECUTION_MODE"] is ExecutionMode.development
    app.extensions["view_counter"] = ViewCounterService(
        store,
        development=development,
        atomic=app.config["VIEWS_ATOMIC_INCREMENT"],
    )
    if development:
        app.logger.info("Development mode: view counts will not be written")

    # Auto-register all blueprints defined in routes/*.py
    from routes import __path__ as routes_path

    for _, module_name, _ in pkgutil.iter_modules(routes_path):
        module = importlib.import_module(f"routes.{module_name}")
        for attr_name in dir(module):
            obj = getattr(module, attr_name)
            if isinstance(obj, Blueprint):
                app.register_blueprint(obj)

    return app


if __name__ == "__main__":
    from os import getenv

    app = create_app()
    app.run(
        host="0.0.0.0",
        port=int(getenv("PORT", 5000)),
        debug=getenv("FLASK_DEBUG", "0") == "1",
        use_reloader=False,
    )
