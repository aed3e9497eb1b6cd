import logging

from flask import Flask, session
from flask_login import LoginManager

from config import Config
from controller import CHATBOT_APOLOGY, COUNTER_IDS, SECTIONS
from models.user import SessionUser
from utils.api_client import build_http_client
from utils.formatters import or_dash
from utils.notifications import toast_color

login_manager = LoginManager()


@login_manager.user_loader
def load_user(user_id):
    info = session.get(Config.SESSION_USER_KEY)
    if not info:
        return None
    user = SessionUser(info)
    return user if user.get_id() == user_id else None


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config['LOG_LEVEL'],
                        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')

    login_manager.init_app(app)

    # One pooled HTTP client for every request to the hostel backend
    app.extensions['hostel_http'] = build_http_client(app.config)

    app.add_template_filter(or_dash)
    app.add_template_global(toast_color)
    app.jinja_env.globals.update(counter_ids=COUNTER_IDS, section_names=list(SECTIONS),
                                 chat_apology=CHATBOT_APOLOGY)

    # Register blueprints
    from routes.main import main_bp
    from routes.auth import auth_bp
    from routes.students import students_bp
    from routes.rooms import rooms_bp
    from routes.payments import payments_bp
    from routes.complaints import complaints_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(students_bp, url_prefix='/students')
    app.register_blueprint(rooms_bp, url_prefix='/rooms')
    app.register_blueprint(payments_bp, url_prefix='/payments')
    app.register_blueprint(complaints_bp, url_prefix='/complaints')

    from cli import hostel_cli
    app.cli.add_command(hostel_cli)

    return app


app = create_app()


if __name__ == '__main__':
    app.run(debug=True)
