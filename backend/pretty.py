# pretty.py
from flask import Blueprint, render_template, current_app
from models import Record, pokedex
from pokemon import search_or_404, record_or_404

pretty_bp = Blueprint('pretty', __name__)


def render_pokemon(record: Record) -> str:
    """Record 1마리 → 독립된 HTML 페이지"""
    return render_template(
        'pokemon_detail.html',
        pokemon=record,
        image_url=f"{current_app.config['POKEMON_IMAGE_URL']}{record.name.lower()}.jpg",
    )


@pretty_bp.route('/pokemon-pretty', methods=['GET'])
def list_pokemon_pretty():
    return render_template('pokemon_list.html', pokemon_list=pokedex.all())

@pretty_bp.route('/pokemon-pretty/search', methods=['GET'])
def search_pokemon_pretty():
    # 결과마다 완성된 페이지를 그대로 이어 붙인다
    return ''.join(render_pokemon(r) for r in search_or_404())

@pretty_bp.route('/pokemon-pretty/<index_of_array>', methods=['GET'])
def get_pokemon_pretty(index_of_array):
    return render_pokemon(record_or_404(index_of_array))
