import pytest

from workshop_queue.core.enums import JobStatus
from workshop_queue.models.job import JobCreate
from workshop_queue.services.blob_job_service import JOBS_KEY, BlobJobService
from workshop_queue.services.blob_store import BlobStore


def new_job() -> JobCreate:
    return JobCreate(
        reg_number="GE-4321-20",
        customer_name="Ama K.",
        service_type="General Repair",
        brand="Mitsubishi",
        status=JobStatus.CHECKED_IN,
        branch="CFAO Airport Workshop",
    )


def test_blob_store_roundtrip_and_delete(tmp_path):
    store = BlobStore(tmp_path)
    assert store.get("autoflow:user") is None

    store.set("autoflow:user", {"username": "sarah"})
    assert store.get("autoflow:user") == {"username": "sarah"}

    store.delete("autoflow:user")
    store.delete("autoflow:user")
    assert store.get("autoflow:user") is None


def test_corrupt_blob_reads_as_missing(tmp_path):
    store = BlobStore(tmp_path)
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    assert store.get("broken") is None


def test_first_access_seeds_two_jobs(tmp_path):
    service = BlobJobService(BlobStore(tmp_path))

    jobs = service.list_jobs()
    assert [job.reg_number for job in jobs] == ["GT-1234-22", "AS-5678-21"]
    assert len(BlobStore(tmp_path).get(JOBS_KEY)) == 2


def test_jobs_and_ids_survive_a_reload(tmp_path):
    service = BlobJobService(BlobStore(tmp_path), seed=False)
    first = service.create_job(new_job())
    second = service.create_job(new_job())
    service.update_job(first.id, {"status": "in-diagnostics"})
    service.delete_job(second.id)

    reloaded = BlobJobService(BlobStore(tmp_path), seed=False)
    assert [job.id for job in reloaded.list_jobs()] == [first.id]
    assert reloaded.get_job(first.id).status == JobStatus.IN_DIAGNOSTICS
    assert reloaded.get_job(first.id).created_at == first.created_at

    third = reloaded.create_job(new_job())
    assert third.id > second.id


def test_empty_stored_list_is_not_reseeded(tmp_path):
    store = BlobStore(tmp_path)
    store.set(JOBS_KEY, [])
    assert BlobJobService(store).list_jobs() == []


def test_failed_write_leaves_memory_untouched(tmp_path, monkeypatch):
    store = BlobStore(tmp_path)
    service = BlobJobService(store, seed=False)
    kept = service.create_job(new_job())

    def disk_full(key, value):
        raise OSError("disk full")

    monkeypatch.setattr(store, "set", disk_full)

    with pytest.raises(OSError):
        service.create_job(new_job())
    with pytest.raises(OSError):
        service.update_job(kept.id, {"status": "ready-for-pickup"})
    with pytest.raises(OSError):
        service.delete_job(kept.id)

    assert [job.id for job in service.list_jobs()] == [kept.id]
    assert service.get_job(kept.id).status == JobStatus.CHECKED_IN

    monkeypatch.undo()
    assert service.create_job(new_job()).id == kept.id + 1
    reloaded = BlobJobService(BlobStore(tmp_path), seed=False)
    assert [job.id for job in reloaded.list_jobs()] == [kept.id, kept.id + 1]
