"""Unit tests for shard selection."""

import pytest

from swaglabs.core.exceptions import ConfigurationError
from swaglabs.testing.sharding import Shard, parse_shard, split_for_shard


class TestParseShard:
    def test_valid(self) -> None:
        assert parse_shard("3/3") == Shard(3, 3)
        assert parse_shard(" 1 / 4 ") == Shard(1, 4)

    @pytest.mark.parametrize("value", ["", "3", "a/b", "0/3", "4/3", "1/0", "-1/3"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_shard(value)

    def test_str(self) -> None:
        assert str(Shard(2, 5)) == "2/5"


class TestSplitForShard:
    ITEMS = [f"test_{i:02d}" for i in range(10)]

    def test_shards_partition_all_items(self) -> None:
        selected = [split_for_shard(self.ITEMS, Shard(i, 3))[0] for i in (1, 2, 3)]

        flat = [item for part in selected for item in part]
        assert sorted(flat) == self.ITEMS
        assert len(flat) == len(set(flat))

    def test_shard_sizes_are_balanced(self) -> None:
        sizes = [len(split_for_shard(self.ITEMS, Shard(i, 3))[0]) for i in (1, 2, 3)]

        assert sizes == [4, 3, 3]

    def test_assignment_ignores_collection_order(self) -> None:
        shuffled = list(reversed(self.ITEMS))

        first, _ = split_for_shard(self.ITEMS, Shard(2, 3))
        second, _ = split_for_shard(shuffled, Shard(2, 3))

        assert sorted(first) == sorted(second)

    def test_preserves_original_order(self) -> None:
        shuffled = list(reversed(self.ITEMS))

        selected, deselected = split_for_shard(shuffled, Shard(1, 2))

        assert selected == [i for i in shuffled if i in selected]
        assert len(selected) + len(deselected) == len(shuffled)

    def test_single_shard_selects_everything(self) -> None:
        selected, deselected = split_for_shard(self.ITEMS, Shard(1, 1))

        assert selected == self.ITEMS
        assert deselected == []

    def test_more_shards_than_items(self) -> None:
        selected, _ = split_for_shard(["only"], Shard(3, 3))

        assert selected == []

    def test_custom_key(self) -> None:
        items = [{"id": "b"}, {"id": "a"}]

        selected, _ = split_for_shard(items, Shard(1, 2), key=lambda item: item["id"])

        assert selected == [{"id": "a"}]
