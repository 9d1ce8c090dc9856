"""
Logging Configuration and Check Audit Trail.

This module provides structured logging for the series engine and an audit
trail for numerical consistency checks. Every validation run records which
checks were performed, against which truncation orders, and how large the
observed discrepancies were, so that a change in a coefficient table can be
traced to the first run that noticed it.

Audit Contents
--------------
Each run records:
- Run identifier and start/end time
- Settings hash (truncation orders, tolerances)
- One entry per executed check with its residual and tolerance
"""

import hashlib
import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
from contextlib import contextmanager
import threading


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the series expansion engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


@dataclass
class CheckRecord:
    """Record of one numerical consistency check.

    Attributes
    ----------
    timestamp : datetime
        When the check ran.
    check_name : str
        Identifier for the check (e.g. 'clenshaw_vs_direct').
    order : int
        Truncation order the check ran against.
    residual : float
        Largest discrepancy observed.
    tolerance : float
        The acceptable discrepancy.
    passed : bool
        Whether the residual is within tolerance.
    context : dict
        Additional context (family, parameter value, ...).
    """
    timestamp: datetime
    check_name: str
    order: int
    residual: float
    tolerance: float
    passed: bool
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RunMetadata:
    """Metadata for a validation run."""
    run_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    settings_hash: str = ""
    checks: List[CheckRecord] = field(default_factory=list)

    def compute_settings_hash(self, settings: Dict[str, Any]) -> str:
        """Compute a deterministic hash of the run settings.

        Parameters
        ----------
        settings : dict
            The settings dictionary.

        Returns
        -------
        str
            Truncated SHA-256 hash of the settings.
        """
        settings_str = json.dumps(settings, sort_keys=True, default=str)
        self.settings_hash = hashlib.sha256(settings_str.encode()).hexdigest()[:16]
        return self.settings_hash


class SeriesAuditLog:
    """Central record of numerical consistency checks.

    Thread Safety
    -------------
    A single instance is shared process-wide; recording is guarded by a lock.

    Examples
    --------
    >>> audit = SeriesAuditLog()
    >>> with audit.run_context("tables_001") as run:
    ...     record = audit.log_check("clenshaw_vs_direct", order=6,
    ...                              residual=3e-16, tolerance=1e-12)
    >>> audit.get_run_summary("tables_001")["failed_checks"]
    0
    """

    _instance: Optional['SeriesAuditLog'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'SeriesAuditLog':
        """Singleton pattern for the global audit log."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._runs: Dict[str, RunMetadata] = {}
        self._current_run_id: Optional[str] = None
        self._records_lock = threading.Lock()
        self._logger = get_logger("audit")
        self._initialized = True

    @contextmanager
    def run_context(self, run_id: str, settings: Optional[Dict[str, Any]] = None):
        """Context manager for a validation run.

        Parameters
        ----------
        run_id : str
            Unique identifier for this run.
        settings : dict, optional
            Settings to compute the hash from.

        Yields
        ------
        RunMetadata
            The metadata object for this run.
        """
        metadata = RunMetadata(run_id=run_id, start_time=datetime.now())

        if settings:
            metadata.compute_settings_hash(settings)

        with self._records_lock:
            self._runs[run_id] = metadata
            self._current_run_id = run_id

        self._logger.info(f"Starting run {run_id} with settings hash {metadata.settings_hash}")

        try:
            yield metadata
        finally:
            metadata.end_time = datetime.now()
            with self._records_lock:
                self._current_run_id = None
            failed = sum(1 for c in metadata.checks if not c.passed)
            self._logger.info(
                f"Completed run {run_id}. "
                f"Checks: {len(metadata.checks)}, failed: {failed}"
            )

    def log_check(
        self,
        check_name: str,
        order: int,
        residual: float,
        tolerance: float,
        context: Optional[Dict[str, Any]] = None
    ) -> CheckRecord:
        """Record the outcome of one consistency check.

        Parameters
        ----------
        check_name : str
            Which check was run.
        order : int
            Truncation order checked.
        residual : float
            The largest observed discrepancy.
        tolerance : float
            The acceptable discrepancy.
        context : dict, optional
            Additional context.

        Returns
        -------
        CheckRecord
            The stored record.
        """
        record = CheckRecord(
            timestamp=datetime.now(),
            check_name=check_name,
            order=order,
            residual=residual,
            tolerance=tolerance,
            passed=abs(residual) <= tolerance,
            context=context or {}
        )

        with self._records_lock:
            if self._current_run_id and self._current_run_id in self._runs:
                self._runs[self._current_run_id].checks.append(record)

        status = "PASS" if record.passed else "FAIL"
        log_msg = (
            f"SERIES CHECK | {check_name} | order={order} | {status} | "
            f"residual={residual:.6e} (tolerance={tolerance:.6e})"
        )

        if record.passed:
            self._logger.debug(log_msg)
        else:
            self._logger.warning(log_msg)
        return record

    def get_run_summary(self, run_id: str) -> Dict[str, Any]:
        """Get a summary of a validation run.

        Parameters
        ----------
        run_id : str
            The run identifier.

        Returns
        -------
        dict
            Summary including check counts and the worst residual per check.
        """
        if run_id not in self._runs:
            raise KeyError(f"No run found with ID {run_id}")

        metadata = self._runs[run_id]

        worst: Dict[str, float] = {}
        for c in metadata.checks:
            worst[c.check_name] = max(worst.get(c.check_name, 0.0), abs(c.residual))

        return {
            "run_id": run_id,
            "settings_hash": metadata.settings_hash,
            "start_time": metadata.start_time.isoformat(),
            "end_time": metadata.end_time.isoformat() if metadata.end_time else None,
            "total_checks": len(metadata.checks),
            "failed_checks": sum(1 for c in metadata.checks if not c.passed),
            "worst_residual_by_check": worst,
        }

    def export_run_artifacts(self, run_id: str, output_path: Path) -> None:
        """Export all check records of a run to JSON.

        Parameters
        ----------
        run_id : str
            The run identifier.
        output_path : Path
            Path to write the JSON file.
        """
        if run_id not in self._runs:
            raise KeyError(f"No run found with ID {run_id}")

        metadata = self._runs[run_id]

        artifacts = {
            "run_id": metadata.run_id,
            "settings_hash": metadata.settings_hash,
            "start_time": metadata.start_time.isoformat(),
            "end_time": metadata.end_time.isoformat() if metadata.end_time else None,
            "checks": [
                {
                    "timestamp": c.timestamp.isoformat(),
                    "check_name": c.check_name,
                    "order": c.order,
                    "residual": c.residual,
                    "tolerance": c.tolerance,
                    "passed": c.passed,
                    "context": c.context
                }
                for c in metadata.checks
            ]
        }

        with open(output_path, 'w') as f:
            json.dump(artifacts, f, indent=2)

        self._logger.info(f"Exported audit artifacts to {output_path}")
