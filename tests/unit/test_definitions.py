"""Unit tests for the definition file loader."""
import pytest

from votebox.bootstrap.definitions import (
    OptionDefinition,
    load_definitions,
    read_options,
    read_polls,
)
from votebox.core.exceptions import DefinitionError
from tests.utils import BAND_POLL, write_rows


@pytest.mark.unit
class TestLoadDefinitions:
    """Test loading a whole data directory."""

    def test_loads_polls_and_options(self, data_dir):
        definitions = load_definitions(data_dir)

        assert [p.title for p in definitions.polls] == [BAND_POLL, "Glasanje za omiljenu web stranicu"]
        assert [o.name for o in definitions.options["band"]] == ["The Beatles", "The Platters", "The Beach Boys"]
        assert [o.name for o in definitions.options["website"]] == ["GitHub", "Python"]

    def test_missing_polls_file_is_fatal(self, data_dir):
        (data_dir / "polls.txt").unlink()

        with pytest.raises(DefinitionError, match="does not exist"):
            load_definitions(data_dir)

    def test_missing_definition_file_is_fatal(self, data_dir):
        (data_dir / "websites-definition.txt").unlink()

        with pytest.raises(DefinitionError, match="websites-definition.txt"):
            load_definitions(data_dir)


@pytest.mark.unit
class TestResultsFile:
    """Test vote counts read from results files."""

    def test_missing_results_file_is_created_with_zero_votes(self, tmp_path):
        write_rows(tmp_path / "defs.txt", [(1, "X", "y"), (2, "Z", "w")])

        options = read_options(tmp_path / "defs.txt", tmp_path / "results.txt")

        assert (tmp_path / "results.txt").read_text(encoding="utf-8") == "1\t0\n2\t0\n"
        assert options == [OptionDefinition(1, "X", "y", 0), OptionDefinition(2, "Z", "w", 0)]

    def test_votes_come_from_results_file(self, tmp_path):
        write_rows(tmp_path / "defs.txt", [(1, "X", "y"), (2, "Z", "w")])
        write_rows(tmp_path / "results.txt", [(2, 7), (1, 3)])

        options = read_options(tmp_path / "defs.txt", tmp_path / "results.txt")

        assert [o.votes for o in options] == [3, 7]

    def test_option_missing_from_results_has_zero_votes(self, tmp_path):
        write_rows(tmp_path / "defs.txt", [(1, "X", "y"), (2, "Z", "w")])
        write_rows(tmp_path / "results.txt", [(1, 4)])

        options = read_options(tmp_path / "defs.txt", tmp_path / "results.txt")

        assert [o.votes for o in options] == [4, 0]


@pytest.mark.unit
class TestMalformedFiles:
    """Test rejection of malformed lines."""

    def test_wrong_field_count(self, tmp_path):
        (tmp_path / "polls.txt").write_text("1\tOnly a title\n", encoding="utf-8")

        with pytest.raises(DefinitionError, match="does not contain 3 attributes"):
            read_polls(tmp_path / "polls.txt")

    def test_non_numeric_id(self, tmp_path):
        (tmp_path / "polls.txt").write_text("one\tTitle\tMessage\n", encoding="utf-8")

        with pytest.raises(DefinitionError, match="'one' is not an integer"):
            read_polls(tmp_path / "polls.txt")

    def test_blank_lines_are_skipped(self, tmp_path):
        (tmp_path / "polls.txt").write_text("\n1\tTitle\tMessage\n\n", encoding="utf-8")

        polls = read_polls(tmp_path / "polls.txt")

        assert len(polls) == 1
        assert polls[0].message == "Message"
