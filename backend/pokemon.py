# pokemon.py
from flask import Blueprint, request, jsonify, abort, current_app
from models import pokedex
from search import filter_records
from utils.params import parse_index

pokemon_bp = Blueprint('pokemon', __name__)

NO_MATCH = 'Sorry, no pokemon found matching your search criteria'


def search_or_404():
    """?type=fire&hp=50 → 모든 조건을 만족하는 Record 목록, 없으면 404"""
    query = request.args.to_dict()          # 같은 key 가 여러 번이면 첫 번째 값
    results = filter_records(pokedex.all(), query)
    current_app.logger.debug("search %s → %d hit(s)", query, len(results))
    if not results:
        abort(404, description=NO_MATCH)
    return results


def record_or_404(index_of_array: str):
    return pokedex.get_or_404(
        parse_index(index_of_array),
        description=f'Sorry, no pokemon found at {request.path}'
    )


# 1) 전체 목록
@pokemon_bp.route('/pokemon', methods=['GET'])
def list_pokemon():
    return jsonify(pokedex.all().to_list())

# 2) 속성 검색
@pokemon_bp.route('/pokemon/search', methods=['GET'])
def search_pokemon():
    """
    예: GET /pokemon/search?type=electric
        GET /pokemon/search?name=pikachu&hp=35
    """
    return jsonify([r.to_dict() for r in search_or_404()])

# 3) 인덱스로 조회
@pokemon_bp.route('/pokemon/<index_of_array>', methods=['GET'])
def get_pokemon(index_of_array):
    return jsonify(record_or_404(index_of_array).to_dict())
