"""
Integration tests for DependencyAnalyzer.

These tests run the full parse-then-resolve pipeline on files, the way the
CLI does.
"""

import json
import time

import pytest

from dependency_resolver import (
    DependencyAnalyzer,
    EmptyInputError,
    ErrorMode,
    InputFileNotFoundError,
    InvalidLineFormatError,
    ResolverConfig,
)


@pytest.fixture
def write_input(tmp_path):
    """Write text to an input file and return its path."""

    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class TestDependencyAnalyzer:
    """End-to-end resolution tests."""

    def setup_method(self):
        """Create analyzer."""
        self.analyzer = DependencyAnalyzer()

    def test_basic_dependencies(self, write_input):
        """Test transitive deps are inserted after their parent."""
        result = self.analyzer.analyze_file(
            write_input("X depends on Y R\nY depends on Z")
        )

        assert result.to_text() == "X depends on Y Z R\nY depends on Z"

    def test_two_line_chain(self, write_input):
        """Test the minimal two-line chain."""
        result = self.analyzer.analyze_file(
            write_input("X depends on Y\nY depends on Z")
        )

        assert result.to_text() == "X depends on Y Z\nY depends on Z"

    def test_complex_dependencies(self, write_input):
        """Test the six-library example."""
        text = "\n".join(
            [
                "A depends on B C",
                "B depends on C E",
                "C depends on G",
                "D depends on A F",
                "E depends on F",
                "F depends on H",
            ]
        )
        expected = "\n".join(
            [
                "A depends on B C G E F H",
                "B depends on C G E F H",
                "C depends on G",
                "D depends on A B C G E F H",
                "E depends on F H",
                "F depends on H",
            ]
        )

        result = self.analyzer.analyze_file(write_input(text))

        assert result.to_text() == expected

    def test_extra_spaces(self, write_input):
        """Test padded tokens."""
        result = self.analyzer.analyze_file(
            write_input("X    depends     on    Y    R\nY    depends    on    Z")
        )

        assert result.to_text() == "X depends on Y Z R\nY depends on Z"

    def test_empty_lines(self, write_input):
        """Test blank lines between and after declarations."""
        result = self.analyzer.analyze_file(
            write_input("X depends on Y\n\n\nY depends on Z\n\n")
        )

        assert result.to_text() == "X depends on Y Z\nY depends on Z"

    def test_multi_character_names(self, write_input):
        """Test longer library names."""
        text = "Alpha depends on Beta Gamma\nBeta depends on Delta\nGamma depends on Delta Epsilon"
        result = self.analyzer.analyze_file(write_input(text))

        assert result.to_lines() == [
            "Alpha depends on Beta Delta Gamma Epsilon",
            "Beta depends on Delta",
            "Gamma depends on Delta Epsilon",
        ]

    def test_special_characters(self, write_input):
        """Test names with punctuation pass through unchanged."""
        text = "\n".join(
            [
                "X@2.0 depends on Y#1.0 Z$3.0",
                "Y#1.0 depends on Z$3.0",
                "package@latest depends on jquery@3.6.0 lodash@4.17.21",
            ]
        )

        result = self.analyzer.analyze_file(write_input(text))

        assert result.to_text() == text

    def test_empty_file(self, write_input):
        """Test an empty file."""
        with pytest.raises(EmptyInputError, match="No valid dependency"):
            self.analyzer.analyze_file(write_input(""))

    def test_file_with_only_empty_lines(self, write_input):
        """Test a file of blank lines."""
        with pytest.raises(EmptyInputError):
            self.analyzer.analyze_file(write_input("\n\n\n"))

    def test_nonexistent_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(InputFileNotFoundError, match="File not found"):
            self.analyzer.analyze_file(tmp_path / "nonexistent.txt")

    def test_invalid_line(self, write_input):
        """Test a malformed line anywhere aborts the run."""
        with pytest.raises(InvalidLineFormatError, match="Invalid line format: X needs Y"):
            self.analyzer.analyze_file(write_input("A depends on B\nX needs Y"))

    def test_analyze_text(self):
        """Test resolving text without a file."""
        result = self.analyzer.analyze_text("X depends on Y\nY depends on Z")

        assert result.libraries == ["X", "Y"]
        assert result.get_dependencies("X") == ["Y", "Z"]


class TestResolutionResult:
    """Tests for the ResolutionResult views."""

    def setup_method(self):
        """Resolve a small graph with a cycle."""
        self.result = DependencyAnalyzer().analyze_text(
            "A depends on B C\nB depends on D\nD depends on B"
        )

    def test_each_library_rendered_once(self):
        """Test every declared library gets exactly one line."""
        lines = self.result.to_lines()
        names = [line.split(" depends on ")[0] for line in lines]

        assert names == ["A", "B", "D"]

    def test_get_dependencies_for_leaf(self):
        """Test leaves resolve to an empty list."""
        assert self.result.get_dependencies("C") == []

    def test_get_dependencies_returns_copy(self):
        """Test callers cannot mutate stored closures."""
        deps = self.result.get_dependencies("A")
        deps.append("Z")

        assert self.result.get_dependencies("A") == ["B", "D", "C"]

    def test_dependents(self):
        """Test reverse lookup from the stored closures."""
        assert self.result.dependents("D") == ["A", "B", "D"]
        assert self.result.dependents("C") == ["A"]

    def test_cycle_reported_as_info(self):
        """Test cycles are recorded but do not stop resolution."""
        infos = [w for w in self.result.warnings if w.level == "INFO"]

        assert len(infos) == 1
        assert "cycle" in infos[0].message.lower()

    def test_dense_cycles_resolve_quickly(self):
        """Test a fully connected graph with default cycle reporting."""
        names = [f"L{i}" for i in range(12)]
        text = "\n".join(
            f"{name} depends on " + " ".join(n for n in names if n != name)
            for name in names
        )

        start = time.time()
        result = DependencyAnalyzer().analyze_text(text)
        elapsed = time.time() - start

        # One note for the whole group, not one per elementary cycle
        infos = [w for w in result.warnings if w.level == "INFO"]
        assert len(infos) == 1
        assert all(name in infos[0].message for name in names)

        assert result.libraries == names
        assert result.get_dependencies("L0") == ["L1", "L0"] + names[2:]
        assert all(len(deps) == 12 for deps in result.closures.values())

        assert elapsed < 5, f"Performance issue: took {elapsed:.2f}s"

    def test_cycle_reporting_can_be_disabled(self):
        """Test report_cycles=False."""
        result = DependencyAnalyzer(
            ResolverConfig(report_cycles=False)
        ).analyze_text("A depends on B\nB depends on A")

        assert result.warnings == []

    def test_to_json(self):
        """Test JSON keeps library order."""
        data = json.loads(self.result.to_json())

        assert list(data) == ["A", "B", "D"]
        assert data["A"] == ["B", "D", "C"]

    def test_to_dict(self):
        """Test full dictionary export."""
        data = self.result.to_dict()

        assert data["dependencies"]["B"] == ["D", "B"]
        assert data["graph"]["libraries"] == ["A", "B", "D"]
        assert data["statistics"]["declared_libraries"] == 3
        assert data["warnings"][0]["level"] == "INFO"

    def test_to_table(self):
        """Test the tabulate rendering."""
        table = self.result.to_table()

        assert "Library" in table
        assert "All dependencies" in table
        assert "B D C" in table
        assert table.startswith("+")

    def test_redeclaration_warning_carried(self):
        """Test parser warnings reach the result."""
        result = DependencyAnalyzer(
            ResolverConfig(on_redeclaration=ErrorMode.WARN)
        ).analyze_text("A depends on B\nA depends on C")

        assert result.to_text() == "A depends on C"
        assert [w.level for w in result.warnings] == ["WARNING"]
