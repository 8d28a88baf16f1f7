"""
Process attribute collection.

This module reads the attributes rules are matched against (comm, argv,
owner, PID and start time) from the operating system using psutil.
"""

import logging
from datetime import datetime
from typing import Iterable, Iterator, Optional

import psutil

from ..models.process import ProcessAttributes

logger = logging.getLogger(__name__)

# Attributes pre-fetched by psutil.process_iter.
PROCESS_ATTRS = ["pid", "name", "cmdline", "username", "create_time"]


def get_process_attributes(proc: psutil.Process) -> Optional[ProcessAttributes]:
    """Snapshot the attributes of one process.

    Processes that exit or deny access while being read are expected during
    a scan and yield None.

    Args:
        proc: A psutil.Process object.

    Returns:
        The process attributes, or None if they could not be read.
    """
    try:
        info = proc.as_dict(attrs=PROCESS_ATTRS)
    except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
        return None

    create_time = info.get("create_time")
    start_time = (
        datetime.fromtimestamp(create_time)
        if create_time is not None
        else datetime.fromtimestamp(0)
    )

    return ProcessAttributes(
        name=info.get("name") or "",
        # cmdline is None when access is denied, empty for kernel threads.
        cmdline=tuple(info.get("cmdline") or ()),
        username=info.get("username") or "",
        pid=proc.pid,
        start_time=start_time,
    )


def iter_process_attributes(pids: Optional[Iterable[int]] = None) -> Iterator[ProcessAttributes]:
    """Yield the attributes of running processes.

    Args:
        pids: Restrict the scan to these PIDs. All processes when None.
            PIDs that do not exist are skipped with a debug message.
    """
    if pids is None:
        procs: Iterable[psutil.Process] = psutil.process_iter()
    else:
        procs = _processes_for_pids(pids)

    for proc in procs:
        attrs = get_process_attributes(proc)
        if attrs is not None:
            yield attrs


def _processes_for_pids(pids: Iterable[int]) -> Iterator[psutil.Process]:
    for pid in pids:
        try:
            yield psutil.Process(pid)
        except psutil.NoSuchProcess:
            logger.debug(f"PID {pid} does not exist, skipping")
