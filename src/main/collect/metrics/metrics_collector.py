from pathlib import Path
from typing import Dict, List

import pandas as pd
from tqdm import tqdm

from src.main.config import METRICS_CSV, PROGRAM_GLOB
from src.main.metrics import registry
from src.main.statement import Statement
from src.main.statement.codec import load


class MetricsCollector:
    """
    Applies every registered statement metric to stored BL programs.
    """

    def __init__(self, pattern: str = PROGRAM_GLOB) -> None:
        """
        Initialize the metrics collector.

        Args:
            pattern (str): Glob used to find program files. Default is "*.json".
        """
        self.pattern: str = pattern

    @staticmethod
    def read_program(path: Path) -> Statement:
        """
        Load a statement tree stored as JSON.

        Args:
            path (Path): Path to the program file.

        Returns:
            Statement: Root of the program.
        """
        return load(path)

    @staticmethod
    def structural(root: Statement) -> Dict[str, int]:
        """
        Compute structural metrics using the registry.

        Args:
            root (Statement): Program to measure.

        Returns:
            dict: Dictionary with structural metric names and values.
        """
        return {name: fn(root) for name, fn in registry.items()}

    def collect(self, programs_dir: Path) -> pd.DataFrame:
        """
        Compute metrics for every program file in a directory.

        Args:
            programs_dir (Path): Directory with stored programs (not searched recursively).

        Returns:
            pd.DataFrame: One row per program, a "program" column with the file
            stem and one column per metric.
        """
        paths: List[Path] = sorted(p for p in programs_dir.glob(self.pattern) if p.is_file())
        if not paths:
            raise ValueError("No programs found.")

        rows = []
        for path in tqdm(paths, desc=programs_dir.name, leave=False):
            row = {"program": path.stem}
            row.update(self.structural(self.read_program(path)))
            rows.append(row)
        return pd.DataFrame(rows, columns=["program"] + list(registry))

    @staticmethod
    def save(df: pd.DataFrame, output_csv: Path) -> None:
        output_csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_csv, index=False)


def main() -> None:
    """
    Entry point for collecting statement metrics.
    """
    programs_dir = Path(input("Path to programs directory: ").strip())
    answer = input(f"Path to output CSV [{METRICS_CSV}]: ").strip()
    output_csv = Path(answer or METRICS_CSV)

    collector = MetricsCollector()
    df = collector.collect(programs_dir)
    collector.save(df, output_csv)

    print(f"Metrics for {len(df)} programs saved to {output_csv}.")


if __name__ == "__main__":
    main()
