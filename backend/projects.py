# projects.py
from flask import Blueprint

projects_bp = Blueprint('projects', __name__)

@projects_bp.route('/<verb>/<adjective>/<noun>', methods=['GET'])
def new_project(verb, adjective, noun):
    """GET /build/shiny/robot → '... called build-shiny-robot!'"""
    message = f'Congratulations on starting a new project called {verb}-{adjective}-{noun}!'
    return message, 200, {'Content-Type': 'text/plain; charset=utf-8'}
