"""
Тесты для JSON хранилища и контрактов (fx_rates.json, users.json)
"""

import json

import pytest
from jsonschema import ValidationError

from fxledger.core.contracts import (
    RateTableValidator,
    SchemaLoader,
    UsersValidator,
    validate_fx_rates,
    validate_users,
)
from fxledger.core.domain import User, UserDirectory, Wallet
from fxledger.errors import StorageError
from fxledger.io import load_rate_table, load_user_directory, save_user_directory

FX_RATES = {
    "eur": {
        "code": "EUR",
        "alphaCode": "EUR",
        "numericCode": "978",
        "name": "Euro",
        "rate": 0.98535489535028,
        "date": "Tue, 13 Sep 2022 11:55:01 GMT",
        "inverseRate": 1.0148627714936,
    },
    "gbp": {
        "code": "GBP",
        "alphaCode": "GBP",
        "numericCode": "826",
        "name": "U.K. Pound Sterling",
        "rate": 0.85438980693642,
        "date": "Tue, 13 Sep 2022 11:55:01 GMT",
        "inverseRate": 1.1704259482983,
    },
}

USERS = [
    {"name": "Ali", "wallet": {"eur": 88.0, "gbp": 1331.4}},
    {"name": "John", "wallet": {"usd": 40.0}},
]


@pytest.fixture
def rates_file(tmp_path):
    path = tmp_path / "fx_rates.json"
    path.write_text(json.dumps(FX_RATES), encoding="utf-8")
    return path


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps(USERS), encoding="utf-8")
    return path


# =============================================================================
# CONTRACTS
# =============================================================================


class TestContracts:
    def test_schemas_are_valid(self):
        loader = SchemaLoader()
        for name in ("fx_rates", "users"):
            assert loader.load_schema(name)["title"] == name

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("nope")

    def test_valid_payloads(self):
        validate_fx_rates(FX_RATES)
        validate_users(USERS)

    def test_rate_requires_inverse_rate(self):
        payload = {"eur": {"code": "EUR", "rate": 0.98}}
        with pytest.raises(ValidationError, match="inverseRate"):
            RateTableValidator().validate(payload)

    def test_rate_must_be_positive(self):
        payload = {"eur": {"code": "EUR", "rate": 0, "inverseRate": 1.0}}
        with pytest.raises(ValidationError):
            validate_fx_rates(payload)

    def test_negative_balance_violates_users_contract(self):
        payload = [{"name": "Ali", "wallet": {"eur": -1}}]
        with pytest.raises(ValidationError):
            UsersValidator().validate(payload)

    def test_users_must_be_array(self):
        with pytest.raises(ValidationError):
            validate_users({"name": "Ali", "wallet": {}})


# =============================================================================
# LOAD / SAVE
# =============================================================================


class TestStorage:
    def test_load_rate_table(self, rates_file):
        table = load_rate_table(rates_file)

        assert len(table) == 2
        assert table.lookup("gbp").inverse_rate == 1.1704259482983
        assert table.pivot_currency == "usd"

    def test_load_rate_table_with_pivot_entry_fails(self, tmp_path):
        path = tmp_path / "fx_rates.json"
        path.write_text(
            json.dumps({"usd": {"code": "USD", "rate": 1.0, "inverseRate": 1.0}}),
            encoding="utf-8",
        )
        with pytest.raises(StorageError, match="invalid rate table"):
            load_rate_table(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(StorageError, match="unable to read file"):
            load_rate_table(tmp_path / "missing.json")

    def test_load_malformed_json(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(StorageError, match="unable to parse JSON"):
            load_user_directory(path)

    def test_load_users(self, users_file):
        directory = load_user_directory(users_file)

        assert len(directory) == 2
        assert directory.find("Ali").wallet.balance_of("gbp") == 1331.4

    def test_load_users_contract_violation(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([{"name": "Ali"}]), encoding="utf-8")
        with pytest.raises(StorageError, match="invalid users file"):
            load_user_directory(path)

    def test_save_then_load(self, users_file):
        directory = load_user_directory(users_file)
        directory.find("Ali").wallet.apply_conversion("eur", "gbp", 88.0, 76.3)

        save_user_directory(directory, users_file)
        reloaded = load_user_directory(users_file)

        assert reloaded.to_payload() == [
            {"name": "Ali", "wallet": {"gbp": 1407.7}},
            {"name": "John", "wallet": {"usd": 40.0}},
        ]

    def test_save_leaves_no_temp_files(self, tmp_path):
        target = tmp_path / "users.json"
        save_user_directory(UserDirectory([User(name="Ali", wallet=Wallet({"eur": 1.0}))]), target)

        assert [p.name for p in tmp_path.iterdir()] == ["users.json"]

    def test_save_to_missing_directory(self, tmp_path):
        with pytest.raises(StorageError, match="unable to write users"):
            save_user_directory(UserDirectory(), tmp_path / "nope" / "users.json")
