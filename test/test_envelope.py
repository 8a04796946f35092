import json
import unittest
from pathlib import Path

from pydantic import ValidationError

from valorant_api.errors import InvalidFormat, MalformedEnvelope
from valorant_api.tracker.envelope import ApiError, Failure, Success, decode_envelope, decode_envelope_json
from valorant_api.tracker.season import SeasonToken
from valorant_api.tracker.structures import AccountData, AccountRegion, MMRData, SeasonData

DATA_DIR = Path(__file__).parent / "data"


def load(name: str) -> dict:
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


class TestDecodeEnvelope(unittest.TestCase):

    def test_account_not_found(self):
        result = decode_envelope(load("not_found_404.json"), AccountData)
        self.assertIsInstance(result, Failure)
        self.assertFalse(result.ok)
        self.assertEqual(result.status, 404)
        self.assertEqual(result.errors, [ApiError(message="Not found", code=0, details="null")])

    def test_account_eu(self):
        result = decode_envelope(load("account_eu_200.json"), AccountData)
        self.assertIsInstance(result, Success)
        self.assertTrue(result.ok)
        self.assertEqual(result.status, 200)
        account: AccountData = result.data
        self.assertEqual(account.name, "NitroSniper")
        self.assertEqual(account.tag, "NERD")
        self.assertEqual(account.region, AccountRegion.EU)
        self.assertEqual(account.account_level, 125)
        self.assertEqual(account.card.id, "bb6ae873-43ec-efb4-3ea6-93ac00a82d4e")
        self.assertEqual(account.last_update_raw, 1676749780)

    def test_account_na(self):
        result = decode_envelope_json((DATA_DIR / "account_na_200.json").read_bytes(), AccountData)
        self.assertIsInstance(result, Success)
        self.assertEqual(result.data.region, AccountRegion.NA)
        self.assertEqual(result.data.last_update, "Now")

    def test_mmr_with_season(self):
        result = decode_envelope(load("mmr_eu_200.json"), MMRData)
        self.assertIsInstance(result, Success)
        mmr: MMRData = result.data
        self.assertEqual(mmr.highest_rank.season, SeasonToken(episode=5, act=3))
        self.assertEqual(mmr.current_data.current_tier, 15)
        self.assertEqual(mmr.current_data.current_tier_patched, "Platinum 1")
        self.assertEqual(mmr.current_data.mmr_change_to_last_game, -17)

        act = mmr.season(SeasonToken(5, 3))
        self.assertTrue(act.has_data)
        self.assertEqual(act.wins, 23)
        self.assertEqual([w.tier for w in act.act_rank_wins], [16, 15])
        self.assertEqual(mmr.season(SeasonToken(1, 1)), SeasonData(error="No data Available"))
        self.assertIsNone(mmr.season(SeasonToken(2, 2)))

    def test_both_fields_prefers_errors(self):
        raw = load("account_eu_200.json")
        raw["errors"] = [{"message": "Rate limited", "code": 429, "details": "slow down"}]
        result = decode_envelope(raw, AccountData)
        self.assertIsInstance(result, Failure)
        self.assertEqual(result.errors[0].code, 429)

    def test_neither_field(self):
        with self.assertRaises(MalformedEnvelope):
            decode_envelope({"status": 200}, AccountData)

    def test_errors_not_a_list(self):
        with self.assertRaises(MalformedEnvelope):
            decode_envelope({"status": 500, "errors": "boom"}, AccountData)

    def test_malformed_api_error(self):
        body = {"status": 404, "errors": [{"message": "Not found", "code": "0", "details": "null"}]}
        self.assertRaises(MalformedEnvelope, decode_envelope, body, AccountData)
        body = {"status": 404, "errors": [{"message": "Not found", "code": 0, "details": None}]}
        self.assertRaises(MalformedEnvelope, decode_envelope, body, AccountData)

    def test_malformed_payload(self):
        raw = load("account_eu_200.json")
        del raw["data"]["puuid"]
        with self.assertRaises(MalformedEnvelope) as ctx:
            decode_envelope(raw, AccountData)
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)
        self.assertIn("puuid", str(ctx.exception))

    def test_payload_of_wrong_kind(self):
        self.assertRaises(MalformedEnvelope, decode_envelope, {"status": 200, "data": []}, AccountData)
        self.assertRaises(MalformedEnvelope, decode_envelope, {"status": 200, "data": None}, AccountData)

    def test_invalid_season_in_payload(self):
        raw = load("mmr_eu_200.json")
        raw["data"]["highest_rank"]["season"] = "e5a5"
        with self.assertRaises(MalformedEnvelope) as ctx:
            decode_envelope(raw, MMRData)
        validation = ctx.exception.__cause__
        self.assertIsInstance(validation, ValidationError)
        self.assertEqual(validation.errors()[0]["loc"], ("data", "highest_rank", "season"))
        season_error = validation.errors()[0]["ctx"]["error"]
        self.assertIsInstance(season_error, InvalidFormat)
        self.assertEqual(season_error.text, "e5a5")

    def test_strict_field_types(self):
        raw = load("account_eu_200.json")
        raw["data"]["account_level"] = "125"
        self.assertRaises(MalformedEnvelope, decode_envelope, raw, AccountData)
        raw = load("mmr_eu_200.json")
        raw["data"]["current_data"]["old"] = 0
        self.assertRaises(MalformedEnvelope, decode_envelope, raw, MMRData)

    def test_null_seasons(self):
        raw = load("mmr_eu_200.json")
        raw["data"]["by_season"] = None
        del raw["data"]["highest_rank"]
        mmr = decode_envelope(raw, MMRData).data
        self.assertEqual(mmr.by_season, {})
        self.assertIsNone(mmr.highest_rank)

    def test_models_are_frozen(self):
        account = decode_envelope(load("account_eu_200.json"), AccountData).data
        with self.assertRaises(ValidationError):
            account.name = "someone else"

    def test_unknown_region(self):
        raw = load("account_eu_200.json")
        raw["data"]["region"] = "mars"
        self.assertRaises(MalformedEnvelope, decode_envelope, raw, AccountData)

    def test_status_required(self):
        raw = load("not_found_404.json")
        del raw["status"]
        self.assertRaises(MalformedEnvelope, decode_envelope, raw, AccountData)
        raw["status"] = True
        self.assertRaises(MalformedEnvelope, decode_envelope, raw, AccountData)

    def test_not_an_object(self):
        self.assertRaises(MalformedEnvelope, decode_envelope, [], AccountData)
        self.assertRaises(MalformedEnvelope, decode_envelope_json, "not json", AccountData)
        self.assertRaises(MalformedEnvelope, decode_envelope_json, b"", AccountData)


class TestEncodeEnvelope(unittest.TestCase):

    def test_failure_emits_only_errors(self):
        raw = load("not_found_404.json")
        failure = decode_envelope(raw, AccountData)
        self.assertEqual(failure.to_dict(), raw)
        self.assertNotIn("data", json.loads(failure.to_json()))

    def test_success_emits_only_data(self):
        raw = load("account_eu_200.json")
        success = decode_envelope(raw, AccountData)
        self.assertEqual(success.to_dict(), raw)
        self.assertNotIn("errors", success.to_dict())

    def test_mmr_encodes_season_text(self):
        success = decode_envelope(load("mmr_eu_200.json"), MMRData)
        encoded = success.to_dict()
        self.assertEqual(encoded["data"]["highest_rank"]["season"], "e5a3")
        self.assertEqual(encoded["data"]["by_season"]["e1a1"], {"error": "No data Available"})
        self.assertEqual(decode_envelope(encoded, MMRData), success)


if __name__ == "__main__":
    unittest.main()
