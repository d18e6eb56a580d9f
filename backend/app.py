from flask import Flask, request
from flask_cors import CORS
from werkzeug.exceptions import NotFound
from config import Config
from models import pokedex, scalar_text
from pokemon import pokemon_bp
from pretty import pretty_bp
from bugs import bugs_bp
from projects import projects_bp

TEXT_PLAIN = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # 원본 JSON 의 key 순서 그대로 응답
    app.json.sort_keys = False
    app.add_template_filter(scalar_text, 'number')

    # ─────────────────────────────────────────────
    #  도감 데이터는 여기서 1회만 로딩 (이후 read-only)
    #  파일이 없거나 형식이 틀리면 서버 기동 자체가 실패
    # ─────────────────────────────────────────────
    pokedex.init_app(app)

    CORS(app)

    @app.errorhandler(NotFound)
    def handle_not_found(e):
        app.logger.info("404 %s", request.full_path.rstrip('?'))
        return e.description, 404, TEXT_PLAIN

    # 정적 경로(/pokemon/search)가 변수 경로보다 우선 매칭됨
    app.register_blueprint(pokemon_bp)
    app.register_blueprint(pretty_bp)
    app.register_blueprint(bugs_bp)
    app.register_blueprint(projects_bp)

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host=app.config['HOST'],
            port=app.config['PORT'],
            debug=app.config['DEBUG'])
