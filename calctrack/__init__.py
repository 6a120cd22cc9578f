from flask import Flask
from flask_restful import Api
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from .config.settings import Config
from .utils.logger import setup_logger
from .utils.exceptions import handle_api_error

db = SQLAlchemy()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Cookies have to cross origins for the front end, so credentials are allowed
    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}}, supports_credentials=True)

    # Initialize extensions
    db.init_app(app)
    api = Api(app)

    # Setup logger
    logger = setup_logger()
    logger.info(f"Initializing backend application ({app.config['STORAGE_BACKEND']} storage)")

    # Register error handler
    app.register_error_handler(Exception, handle_api_error)

    # Storage backend, shared by every request
    from .repositories.factory import init_storage
    init_storage(app)

    # Register API resources
    from .api.resources.health import HealthCheck
    from .api.resources.auth import Register, Login, Logout, CurrentUser
    from .api.resources.calculation import CalculationList, CalculationItem
    from .api.resources.project import ProjectList, ProjectItem
    from .api.resources.stats import Stats

    api.add_resource(HealthCheck, '/')
    api.add_resource(Register, '/api/auth/register')
    api.add_resource(Login, '/api/auth/login')
    api.add_resource(Logout, '/api/auth/logout')
    api.add_resource(CurrentUser, '/api/auth/me')
    api.add_resource(CalculationList, '/api/calculations')
    api.add_resource(CalculationItem, '/api/calculations/<string:calculation_id>')
    api.add_resource(ProjectList, '/api/projects')
    api.add_resource(ProjectItem, '/api/projects/<string:project_id>')
    api.add_resource(Stats, '/api/stats')

    return app
