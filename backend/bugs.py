# bugs.py
from flask import Blueprint, redirect, url_for
from utils.params import parse_count, format_number

bugs_bp = Blueprint('bugs', __name__)

START_COUNT = 99
MAX_COUNT   = 200     # 이보다 많으면 "Start over"


def bug_message(count: float) -> str:
    message = f'{format_number(count)} little bugs in the code'
    if count > MAX_COUNT:
        message += '<br><a href="/">Start over</a>'
    else:
        message += (f'<br><a href="/bugs/{format_number(count + 2)}">'
                    'Pull one down, patch it around</a>')
    return message


@bugs_bp.route('/', methods=['GET'])
def start_over():
    return redirect(url_for('bugs.bugs'))

@bugs_bp.route('/bugs', methods=['GET'])
def bugs():
    return bug_message(START_COUNT)

@bugs_bp.route('/bugs/<number_of_bugs>', methods=['GET'])
def bugs_count(number_of_bugs):
    # 숫자가 아니어도 거절하지 않음 → "NaN little bugs ..."
    return bug_message(parse_count(number_of_bugs))
