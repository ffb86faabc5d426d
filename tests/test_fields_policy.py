"""
字段字典、字段合并、完整性判断。
"""
import pytest

from nextcrm.intake.fields import (
    CONTACT_FIELDS,
    FIELD_KEYS,
    FIELD_LABELS,
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    empty_fields,
    normalize_fields,
)
from nextcrm.intake.merger import merge_fields
from nextcrm.intake.policy import is_ready, missing_fields, resolve_status


class TestFieldDictionary:
    def test_groups_partition_all_keys(self):
        assert REQUIRED_FIELDS == ("name", "company")
        assert CONTACT_FIELDS == ("phone", "email", "wechat_id")
        assert set(REQUIRED_FIELDS) | set(CONTACT_FIELDS) | set(OPTIONAL_FIELDS) == set(FIELD_KEYS)
        assert len(FIELD_KEYS) == len(set(FIELD_KEYS))

    def test_labels(self):
        assert FIELD_LABELS["name"] == "姓名"
        assert FIELD_LABELS["wechat_id"] == "微信号"
        assert set(FIELD_LABELS) == set(FIELD_KEYS)

    def test_empty_fields(self):
        assert empty_fields() == {k: "" for k in FIELD_KEYS}

    def test_normalize_drops_unknown_and_trims(self):
        raw = {"name": " 张三 ", "industry": "制造", "phone": None}
        out = normalize_fields(raw)
        assert out["name"] == "张三"
        assert out["phone"] == ""
        assert "industry" not in out
        assert set(out) == set(FIELD_KEYS)
        assert raw["name"] == " 张三 "

    def test_normalize_none(self):
        assert normalize_fields(None) == empty_fields()


class TestMerge:
    def test_non_empty_extraction_overwrites(self):
        """场景 B：用户纠正电话，新值覆盖旧值。"""
        confirmed = {"name": "张三", "company": "ABC", "phone": "111"}
        merged = merge_fields(confirmed, {"phone": "222"})
        assert merged["phone"] == "222"
        assert merged["name"] == "张三"

    def test_empty_extraction_does_not_clear(self):
        """场景 C：本轮未提及电话（空串），保留已确认值。"""
        confirmed = {"name": "张三", "company": "ABC", "phone": "111"}
        merged = merge_fields(confirmed, {"phone": ""})
        assert merged["phone"] == "111"

    def test_missing_key_does_not_clear(self):
        merged = merge_fields({"email": "a@b.com"}, {"name": "张三"})
        assert merged["email"] == "a@b.com"
        assert merged["name"] == "张三"

    def test_result_has_every_key(self):
        assert set(merge_fields({}, {})) == set(FIELD_KEYS)

    def test_merge_with_empty_is_idempotent(self):
        a = {"name": "张三", "company": "ABC"}
        b = {"phone": "13800138000", "company": ""}
        once = merge_fields(a, b)
        assert merge_fields(once, {}) == once

    def test_monotonic_across_turns(self):
        turns = [
            {"name": "张三"},
            {"name": "", "company": "ABC"},
            {"phone": "111", "company": ""},
            {"name": "", "company": "", "phone": ""},
        ]
        current: dict = {}
        seen_filled: set = set()
        for extracted in turns:
            current = merge_fields(current, extracted)
            for key in seen_filled:
                assert current[key] != ""
            seen_filled |= {k for k, v in current.items() if v}
        assert current["name"] == "张三"
        assert current["company"] == "ABC"
        assert current["phone"] == "111"

    def test_inputs_not_mutated(self):
        confirmed = {"name": "张三"}
        extracted = {"name": "李四"}
        merge_fields(confirmed, extracted)
        assert confirmed == {"name": "张三"}
        assert extracted == {"name": "李四"}


class TestPolicy:
    @pytest.mark.parametrize("contact", ["phone", "email", "wechat_id"])
    def test_ready_with_any_contact(self, contact):
        fields = {"name": "张三", "company": "ABC", contact: "x"}
        assert is_ready(fields) is True
        assert missing_fields(fields) == []

    def test_missing_contact(self):
        fields = {"name": "张三", "company": "ABC", "position": "CTO"}
        assert is_ready(fields) is False
        assert missing_fields(fields) == ["contact"]

    def test_missing_required(self):
        fields = {"name": "张三", "phone": "111"}
        assert is_ready(fields) is False
        assert missing_fields(fields) == ["company"]

    def test_whitespace_is_empty(self):
        assert is_ready({"name": " ", "company": "ABC", "phone": "111"}) is False

    def test_empty(self):
        assert is_ready({}) is False
        assert missing_fields({}) == ["name", "company", "contact"]

    def test_optional_fields_never_block(self):
        fields = {"name": "张三", "company": "ABC", "email": "a@b.com", "budget": "", "notes": ""}
        assert is_ready(fields) is True

    def test_resolve_status(self):
        assert resolve_status(True) == "ready_for_confirmation"
        assert resolve_status(False) == "collecting"
