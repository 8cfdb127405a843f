"""Benchmark configuration and metadata management."""

import os
import subprocess
from dataclasses import dataclass
from typing import Optional


@dataclass
class BenchmarkConfig:
    """Configuration for experiment runs."""

    # Reproducibility
    seed: int = 42

    # Prefix experiment: trees of size prefix_step * i for i = 1..rounds
    prefix_step: int = 500
    # Insert experiment: sequences of length insert_step * i for i = 1..rounds
    insert_step: int = 1000
    rounds: int = 5
    # Number of leading keys reported separately in the prefix experiment
    head_count: int = 100

    # Execution control
    show_progress: bool = True

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            rounds=int(os.environ.get("BENCHMARK_ROUNDS", "5")),
            show_progress=os.environ.get("BENCHMARK_NO_PROGRESS", "").lower() != "true",
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        )


def get_git_commit_hash() -> Optional[str]:
    """Get the current git commit hash."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
            cwd=os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


@dataclass
class BenchmarkMetadata:
    """Metadata about an experiment run."""

    commit_hash: Optional[str]
    config: BenchmarkConfig

    def __str__(self) -> str:
        """Format metadata as string."""
        lines = [
            f"Commit: {self.commit_hash or 'unknown'}",
            f"Seed: {self.config.seed}",
            f"Rounds: {self.config.rounds}",
            f"Prefix step: {self.config.prefix_step}",
            f"Insert step: {self.config.insert_step}",
        ]
        return "\n".join(lines)
