# config.py
import os
import pathlib

BASE_DIR = pathlib.Path(__file__).resolve().parent

class Config:
    # ──────────────────────────────────────────────
    # 도감 데이터 – 서버 기동 시 1회만 읽음, env 로 덮어쓸 수 있음
    # ──────────────────────────────────────────────
    POKEMON_DATA_PATH = os.environ.get(
        "POKEMON_DATA_PATH",
        str(BASE_DIR / "data" / "pokemon.json")
    )

    # 상세 페이지 <img> 주소 = POKEMON_IMAGE_URL + 이름(소문자) + ".jpg"
    POKEMON_IMAGE_URL = os.environ.get(
        "POKEMON_IMAGE_URL",
        "http://img.pokemondb.net/artwork/"
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # ──────────────────────────────────────────────
    # 개발 서버 (python app.py) 설정
    # ──────────────────────────────────────────────
    HOST  = os.environ.get("HOST", "0.0.0.0")
    PORT  = int(os.environ.get("PORT", 5000))
    DEBUG = os.environ.get("FLASK_DEBUG", "0").lower() in ("1", "true", "yes")
