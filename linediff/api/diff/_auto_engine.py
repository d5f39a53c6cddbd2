"""Auto engine selection for diff operations."""


def select_auto_diff_engine(line_count_a: int, line_count_b: int, max_table_cells: int) -> str:
    """Select diff engine automatically based on input size.

    Args:
        line_count_a: Number of lines in the first sequence
        line_count_b: Number of lines in the second sequence
        max_table_cells: Largest LCS table the full-table engine may allocate

    Returns:
        Engine name: "lcs" or "hirschberg"
    """
    if (line_count_a + 1) * (line_count_b + 1) <= max_table_cells:
        return "lcs"
    return "hirschberg"


__all__ = ["select_auto_diff_engine"]
