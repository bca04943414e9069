import csv
import logging
from pathlib import Path
from typing import List

from wgraph.models import EdgeRecord
from wgraph.topology import WeightedGraph

logger = logging.getLogger(__name__)


class CSVReader:
    """Handles reading edge-list CSV files."""

    def __init__(self, filepath: str):
        self.filepath = Path(filepath)

    def read(self) -> List[EdgeRecord]:
        """Read CSV and return list of EdgeRecord objects."""
        if not self.filepath.exists():
            raise FileNotFoundError(f"CSV not found: {self.filepath}")

        records: List[EdgeRecord] = []
        with self.filepath.open("r", newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            for idx, row in enumerate(reader, start=2):  # header is line 1
                try:
                    records.append(EdgeRecord.from_dict(row))
                except (KeyError, ValueError) as e:
                    # Keep going; one bad row shouldn't abort the load
                    logger.warning("Skipping invalid row at line %d: %s", idx, e)

        logger.debug("Read %d record(s) from %s", len(records), self.filepath)
        return records

    def read_graph(self) -> WeightedGraph[str]:
        """Build a graph from the records; vertices appear in first-mention order."""
        g: WeightedGraph[str] = WeightedGraph()
        for r in self.read():
            g.add_vertex(r.u)
            if r.is_vertex_only:
                continue
            g.add_vertex(r.v)
            if g.are_adjacent(r.u, r.v):
                logger.warning("Duplicate edge %s-%s; replacing with weight %d", r.u, r.v, r.weight)
            g.add_edge(r.u, r.v, r.weight)
        return g
