from datetime import datetime, timezone

import pytest

from workshop_queue.core.enums import JobStatus
from workshop_queue.models.job import Job
from workshop_queue.services.queue_aggregator import filter_jobs, summarize


def make_job(job_id: int, status: str, is_priority: bool = False, **overrides) -> Job:
    data = dict(
        id=job_id,
        queue_number=job_id,
        reg_number=f"GT-{job_id:04d}-22",
        customer_name=f"Customer {job_id}",
        service_type="Oil Change",
        brand="Suzuki",
        status=status,
        branch="CFAO Airport",
        is_priority=is_priority,
        created_at=datetime.now(timezone.utc),
    )
    data.update(overrides)
    return Job(**data)


def test_counts_per_status_and_total():
    jobs = [
        make_job(1, "checked-in"),
        make_job(2, "checked-in"),
        make_job(3, "ready-for-pickup"),
    ]
    summary = summarize(jobs)

    assert summary.status_counts == {
        JobStatus.CHECKED_IN: 2,
        JobStatus.READY_FOR_PICKUP: 1,
    }
    assert summary.total == 3
    assert summary.in_queue == 2


def test_priority_count():
    jobs = [make_job(1, "checked-in", True), make_job(2, "in-diagnostics")]
    assert summarize(jobs).priority_count == 1


def test_empty_collection():
    summary = summarize([])
    assert summary.total == 0
    assert summary.status_counts == {}


def test_statistics_payload_shape():
    stats = summarize([make_job(1, "work-in-progress", True)], branch="CFAO Airport").to_statistics()

    assert stats["data"]["serviceStatusCounts"] == {"work-in-progress": 1}
    assert stats["data"]["totalServices"] == 1
    assert stats["data"]["priorityCount"] == 1
    assert stats["data"]["queue"] == {"totalInQueue": 1}
    assert stats["data"]["branch"] == "CFAO Airport"


def test_filter_by_search_status_and_priority():
    jobs = [
        make_job(1, "checked-in", customer_name="Linda A."),
        make_job(2, "checked-in", True, reg_number="AS-5678-21"),
        make_job(3, "ready-for-pickup", True),
    ]

    assert [j.id for j in filter_jobs(jobs, search="linda")] == [1]
    assert [j.id for j in filter_jobs(jobs, search="as-5678")] == [2]
    assert [j.id for j in filter_jobs(jobs, status=JobStatus.CHECKED_IN)] == [1, 2]
    assert [j.id for j in filter_jobs(jobs, priority="priority")] == [2, 3]
    assert [j.id for j in filter_jobs(jobs, priority="regular")] == [1]


def test_filter_rejects_unknown_priority():
    with pytest.raises(ValueError):
        filter_jobs([], priority="urgent")
