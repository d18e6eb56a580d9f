import json
import pathlib
from dataclasses import dataclass
from typing import Any

from flask import abort, current_app

from utils.params import format_number


class DatasetError(ValueError):
    """도감 JSON 이 기대한 모양이 아닐 때 (서버 기동 실패)"""


def scalar_text(value) -> str:
    return value if isinstance(value, str) else format_number(value)


# ─────────────────────────────────────────────
#  Record 속성 = 아래 4가지 중 하나 (로딩 시 1회 결정)
# ─────────────────────────────────────────────
@dataclass(frozen=True)
class Text:
    value: str

    def matches(self, wanted: str) -> bool:
        return self.value.lower() == wanted

    def to_json(self):
        return self.value


@dataclass(frozen=True)
class Number:
    value: int | float | bool

    def matches(self, wanted: str) -> bool:
        return format_number(self.value).lower() == wanted

    def to_json(self):
        return self.value


@dataclass(frozen=True)
class TagList:
    values: tuple[str, ...]

    def matches(self, wanted: str) -> bool:
        return any(v.lower() == wanted for v in self.values)

    def to_json(self):
        return list(self.values)


@dataclass(frozen=True)
class Table:
    """stats / damages / misc 처럼 key → scalar 매핑. 순서 유지."""
    entries: tuple[tuple[str, Any], ...]

    def matches(self, wanted: str) -> bool:
        # 어느 sub-key 든 값 하나만 같으면 통과
        return any(scalar_text(v).lower() == wanted for _, v in self.entries)

    def lookup(self, key: str):
        """같은 이름(대소문자 무시)의 sub-key 가 여러 개면 정확히 같은 것을 우선"""
        for k, v in self.entries:
            if k == key:
                return v
        found = self.lookup_all(key)
        return found[0] if found else None

    def lookup_all(self, key: str) -> list:
        key = key.lower()
        return [v for k, v in self.entries if k.lower() == key]

    def items(self):
        return list(self.entries)

    def to_json(self):
        return dict(self.entries)


def _is_scalar(value) -> bool:
    return isinstance(value, (str, int, float))


def to_attribute(key: str, value):
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (bool, int, float)):
        return Number(value)
    if isinstance(value, list):
        if not all(isinstance(v, str) for v in value):
            raise DatasetError(f"'{key}' must be a list of strings")
        return TagList(tuple(value))
    if isinstance(value, dict):
        for sub_key, sub_value in value.items():
            if not _is_scalar(sub_value):
                raise DatasetError(f"'{key}.{sub_key}' must be a string or a number")
        return Table(tuple(value.items()))
    raise DatasetError(f"'{key}' has unsupported value {value!r}")


class Record:
    """도감 한 마리. 로딩 이후 변경 불가."""

    __slots__ = ('_attributes', '_by_key')

    def __init__(self, attributes: dict):
        object.__setattr__(self, '_attributes', dict(attributes))
        by_key = {}
        for k, v in attributes.items():
            by_key.setdefault(k.lower(), []).append(v)
        object.__setattr__(self, '_by_key', by_key)

    def __setattr__(self, name, value):
        raise AttributeError('Record is read-only')

    @classmethod
    def from_dict(cls, data: dict) -> 'Record':
        if not isinstance(data, dict):
            raise DatasetError(f'pokemon entry must be an object, got {data!r}')
        if not isinstance(data.get('name'), str):
            raise DatasetError(f'pokemon entry without a name: {data!r}')
        return cls({k: to_attribute(k, v) for k, v in data.items()})

    @property
    def name(self) -> str:
        return self._attributes['name'].value

    @property
    def types(self) -> list[str]:
        attr = self.attribute('type')
        return list(attr.values) if isinstance(attr, TagList) else []

    def attribute(self, key: str):
        """정확히 같은 key 우선, 없으면 대소문자 무시하고 첫 번째"""
        if key in self._attributes:
            return self._attributes[key]
        found = self.attributes(key)
        return found[0] if found else None

    def attributes(self, key: str) -> list:
        return self._by_key.get(key.lower(), [])

    def table(self, key: str) -> Table:
        attr = self.attribute(key)
        return attr if isinstance(attr, Table) else Table(())

    def tables(self) -> list[Table]:
        return [a for a in self._attributes.values() if isinstance(a, Table)]

    def to_dict(self):
        return {k: a.to_json() for k, a in self._attributes.items()}

    def __eq__(self, other):
        return isinstance(other, Record) and self._attributes == other._attributes

    def __hash__(self):
        return hash(tuple(self._attributes.items()))

    def __repr__(self):
        return f'<Record {self.name}>'


class Dataset:
    """0-based 인덱스로 접근하는 읽기 전용 Record 목록"""

    def __init__(self, records):
        self._records = tuple(records)

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def get(self, index: int | None) -> Record | None:
        if index is None or not 0 <= index < len(self._records):
            return None
        return self._records[index]

    def to_list(self):
        return [r.to_dict() for r in self._records]


def load_dataset(path) -> Dataset:
    path = pathlib.Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise DatasetError(f'{path} must contain a JSON array')
    return Dataset(Record.from_dict(entry) for entry in data)


class Pokedex:
    """
    flask_sqlalchemy 의 db 처럼 앱에 붙이는 확장.
    init_app() 에서 데이터를 1회 로딩해 app.extensions 에 보관한다.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        path = app.config["POKEMON_DATA_PATH"]
        dataset = load_dataset(path)
        app.extensions["pokedex"] = dataset
        app.logger.info("loaded %d pokemon from %s", len(dataset), path)

    @property
    def dataset(self) -> Dataset:
        return current_app.extensions["pokedex"]

    def all(self) -> Dataset:
        return self.dataset

    def get_or_404(self, index: int | None, description=None) -> Record:
        record = self.dataset.get(index)
        if record is None:
            abort(404, description=description)
        return record


pokedex = Pokedex()
