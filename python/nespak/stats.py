"""
NESPAK Status Reports

Before/after size accounting printed by the CLI and logged by the codec.
"""

from dataclasses import dataclass


@dataclass
class CompressionStats:
    """
    Sizes of one pack or unpack call.

    Attributes:
        before: Input size in bytes
        after: Output size in bytes
    """
    before: int
    after: int

    @property
    def saved(self) -> int:
        """Bytes saved (negative when the output grew)."""
        return self.before - self.after

    @property
    def compression(self) -> float:
        """Space saving as a percentage of the input size."""
        if self.before == 0:
            return 0.0
        return self.saved / self.before * 100

    @property
    def ratio(self) -> float:
        """Input size over output size."""
        if self.after == 0:
            return 0.0
        return self.before / self.after

    def report(self) -> str:
        """Format the status report."""
        lines = [
            f"{'Before:':<15}{self.before:,} bytes",
            f"{'After:':<15}{self.after:,} bytes",
            f"{'Compression:':<15}{self.compression:.2f}%",
            f"{'Ratio:':<15}{self.ratio:.1f}:1",
        ]
        return '\n'.join(lines)


def print_report(stats: CompressionStats, title: str = "Status Report") -> None:
    """Print a status report block to stdout."""
    print("=============================")
    print(title)
    print("=============================")
    print(stats.report())
