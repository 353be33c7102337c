"""Tests for the roster data provider."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

import db.member_db as member_db
from db.member_db import DEFAULT_ROSTER, load_members, member_from_row
from models.member import House, Title

_HEADER = "id,name,house,title,salary,birthdate\n"


def _write_csv(tmp_path: Path, body: str, header: str = _HEADER) -> str:
    path = tmp_path / "roster.csv"
    path.write_text(header + body, encoding="utf-8")
    return str(path)


class TestDefaultRoster:
    def test_size(self) -> None:
        assert len(DEFAULT_ROSTER) == 22

    def test_ids_are_unique(self) -> None:
        ids = [m.id for m in DEFAULT_ROSTER]
        assert len(ids) == len(set(ids))

    def test_salaries_are_non_negative(self) -> None:
        assert all(m.salary >= 0 for m in DEFAULT_ROSTER)

    def test_load_without_path_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(member_db, "ROSTER_CSV_PATH", "")
        assert load_members() is DEFAULT_ROSTER


class TestMemberFromRow:
    def test_parses_all_fields(self) -> None:
        member = member_from_row({
            "id": "3", "name": " Arya ", "house": "stark", "title": "Lady",
            "salary": "50000", "birthdate": "1997-04-15",
        })
        assert member.id == 3
        assert member.name == "Arya"
        assert member.house == House.STARK
        assert member.title == Title.LADY
        assert member.salary == 50000.0
        assert member.birthdate == date(1997, 4, 15)

    def test_unknown_house(self) -> None:
        with pytest.raises(ValueError, match="Unknown house"):
            member_from_row({
                "id": "1", "name": "Hodor", "house": "Hodor", "title": "SIR",
                "salary": "1", "birthdate": "1970-01-01",
            })

    def test_unknown_title(self) -> None:
        with pytest.raises(ValueError, match="Unknown title"):
            member_from_row({
                "id": "1", "name": "Hodor", "house": "STARK", "title": "Stableboy",
                "salary": "1", "birthdate": "1970-01-01",
            })

    def test_missing_column(self) -> None:
        with pytest.raises(KeyError):
            member_from_row({"id": "1", "name": "Hodor"})


class TestLoadFromCsv:
    def test_loads_in_file_order(self, tmp_path: Path) -> None:
        path = _write_csv(
            tmp_path,
            "7,Sandor,LANNISTER,SIR,40000,1971-02-01\n"
            "1,Sansa,STARK,LADY,60000,1996-02-21\n",
        )
        members = load_members(path)
        assert isinstance(members, tuple)
        assert [(m.id, m.name) for m in members] == [(7, "Sandor"), (1, "Sansa")]
        assert members[0].house == House.LANNISTER

    def test_uses_configured_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write_csv(tmp_path, "1,Jon,SNOW,KING,90000,1986-12-26\n")
        monkeypatch.setattr(member_db, "ROSTER_CSV_PATH", path)
        assert [m.name for m in load_members()] == ["Jon"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_members(str(tmp_path / "nope.csv"))

    def test_missing_columns(self, tmp_path: Path) -> None:
        path = _write_csv(tmp_path, "1,Jon\n", header="id,name\n")
        with pytest.raises(KeyError, match="house"):
            load_members(path)

    def test_bad_house(self, tmp_path: Path) -> None:
        path = _write_csv(tmp_path, "1,Jon,NIGHTSWATCH,LORD,1,1986-12-26\n")
        with pytest.raises(ValueError):
            load_members(path)

    @pytest.mark.parametrize("name", ["None", "NA", "null", "nan"])
    def test_na_like_names_are_kept(self, tmp_path: Path, name: str) -> None:
        path = _write_csv(tmp_path, f"1,{name},STARK,SIR,100,1990-01-01\n")
        assert load_members(path)[0].name == name

    def test_blank_name_rejected(self, tmp_path: Path) -> None:
        path = _write_csv(tmp_path, "1,,STARK,SIR,100,1990-01-01\n")
        with pytest.raises(ValueError, match="name is empty"):
            load_members(path)

    def test_blank_salary_rejected(self, tmp_path: Path) -> None:
        path = _write_csv(tmp_path, "1,Hodor,STARK,SIR,,1990-01-01\n")
        with pytest.raises(ValueError):
            load_members(path)

    @pytest.mark.parametrize("salary", ["nan", "inf"])
    def test_non_finite_salary_rejected(self, tmp_path: Path, salary: str) -> None:
        path = _write_csv(tmp_path, f"1,Hodor,STARK,SIR,{salary},1990-01-01\n")
        with pytest.raises(ValueError, match="finite"):
            load_members(path)
