"""Shared test fixtures."""

import pytest

from complex_eval.model.complex import Complex

PPI_LINES = [
    "A\tB",
    "B\tC",
    "C\tD",
    "A\tD",
]

REFERENCE_LINES = ["A B C"]
PREDICTED_LINES = ["A B D"]


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n")
    return str(path)


@pytest.fixture
def complex_abc():
    return Complex.from_members(["A", "B", "C"])


@pytest.fixture
def complex_abd():
    return Complex.from_members(["A", "B", "D"])


@pytest.fixture
def sample_files(tmp_path):
    """PPI over A-D, one reference complex A B C, one predicted complex A B D."""
    return {
        "ppi_path": write_lines(tmp_path / "ppi.txt", PPI_LINES),
        "ref_complex_path": write_lines(tmp_path / "reference.txt", REFERENCE_LINES),
        "pre_complex_path": write_lines(tmp_path / "predicted.txt", PREDICTED_LINES),
        "temp_dir": tmp_path,
    }


@pytest.fixture
def larger_files(tmp_path):
    """P1-P11 network, three reference and five predicted complexes kept at min_size=3."""
    ppi = ["P%d P%d" % (i, i + 1) for i in range(1, 11)]
    reference = [
        "P1 P2 P3 P4",
        "P5 P6 P7",
        "P8 P9 P10",
        "P1 P11",
    ]
    predicted = [
        "P1 P2 P3",
        "P5 P6 P11",
        "P9 P10 P11 P12",
        "P2 P7 P8",
        "P12 P13 P14",
        "P3 P4",
    ]
    return {
        "ppi_path": write_lines(tmp_path / "ppi.txt", ppi),
        "ref_complex_path": write_lines(tmp_path / "reference.txt", reference),
        "pre_complex_path": write_lines(tmp_path / "predicted.txt", predicted),
        "temp_dir": tmp_path,
    }
