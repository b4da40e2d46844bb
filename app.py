import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from colors import random_color
from config import Config

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level='INFO'):
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


def create_app(overrides=None):
    """Build the Flask app serving random colors and the static front end."""
    settings = Config()
    app = Flask(__name__, static_folder=settings.STATIC_FOLDER, static_url_path='')
    app.config.from_object(settings)
    if overrides:
        app.config.update(overrides)

    CORS(app, send_wildcard=True)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if not request.path.startswith('/api/'):
            return error
        response = jsonify(error=error.name, status=error.code)
        response.status_code = error.code
        return response

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    @app.route('/api/color/random')
    def color_random():
        color = random_color()
        logger.debug('Generated color %s', color['hex'])
        return jsonify(color)

    return app


if __name__ == '__main__':
    app = create_app()
    configure_logging(app.config['LOG_LEVEL'])
    logger.info('Server running on http://%s:%s', app.config['HOST'], app.config['PORT'])
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'])
