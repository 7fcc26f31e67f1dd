import threading
from typing import Callable, Dict, List, Optional

from .models import JobRecord

Mutator = Callable[[Optional[JobRecord]], JobRecord]


class JobRegistry:
    """
    In-memory job store, keyed by the canonical (string) job id.
    Lives for the process lifetime; swap for redis/DB when running more than one instance.

    Sync routes run on a thread pool, so upserts for the same id are serialized
    through a per-id lock while different ids proceed independently.
    """

    def __init__(self):
        self._jobs: Dict[str, JobRecord] = {}
        self._guard = threading.Lock()
        self._id_locks: Dict[str, threading.Lock] = {}

    def _lock_for(self, job_id: str) -> threading.Lock:
        with self._guard:
            lock = self._id_locks.get(job_id)
            if lock is None:
                lock = self._id_locks[job_id] = threading.Lock()
            return lock

    def create(self, record: JobRecord) -> JobRecord:
        with self._lock_for(record.id):
            with self._guard:
                self._jobs[record.id] = record
        return record

    def upsert(self, job_id: str, mutator: Mutator) -> JobRecord:
        with self._lock_for(job_id):
            with self._guard:
                current = self._jobs.get(job_id)
            updated = mutator(current)
            with self._guard:
                self._jobs[job_id] = updated
            return updated

    def get(self, job_id: str) -> Optional[JobRecord]:
        with self._guard:
            return self._jobs.get(job_id)

    def all(self) -> List[JobRecord]:
        with self._guard:
            return list(self._jobs.values())

    def __len__(self) -> int:
        with self._guard:
            return len(self._jobs)

    def __contains__(self, job_id: object) -> bool:
        with self._guard:
            return job_id in self._jobs
