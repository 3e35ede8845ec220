from dotenv import load_dotenv
from .errors import register_error_handlers
from flask import Flask
from .config import Config
from .extensions import db, migrate, ma
from flasgger import Swagger
from .swagger_config import swagger_template
from .middleware.request_id import init_request_id
from .cli import register_cli

load_dotenv()

def create_app(config_class=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])
    Swagger(app, template=swagger_template(app))
    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Middleware + errors
    init_request_id(app)
    register_error_handlers(app)

    # Blueprint imports
    from .api.page.routes import page_bp
    from .api.tally.routes import tally_bp

    # Blueprints
    app.register_blueprint(page_bp)
    app.register_blueprint(tally_bp, url_prefix="/api")

    register_cli(app)

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    return app
