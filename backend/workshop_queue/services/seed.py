"""Datos de ejemplo para arrancar con algo en pantalla."""

from __future__ import annotations

import logging

from workshop_queue.core.enums import JobStatus, UserRole
from workshop_queue.models.job import JobCreate
from workshop_queue.models.user import UserCreate
from workshop_queue.services.job_service import JobService
from workshop_queue.services.user_service import UserService

logger = logging.getLogger(__name__)

DEMO_BRANCH = "CFAO Airport Workshop"

DEMO_USERS = (
    UserCreate(
        username="sarah@autoflow.com",
        password="password123",
        branch=DEMO_BRANCH,
        role=UserRole.STAFF,
    ),
    UserCreate(
        username="admin@autoflow.com",
        password="adminpassword",
        branch="All Branches",
        role=UserRole.SUPERADMIN,
    ),
)

DEMO_JOBS = (
    JobCreate(
        queue_number=12,
        reg_number="GT-1234-22",
        customer_name="Aminu S.",
        service_type="Full Service",
        brand="Toyota",
        status=JobStatus.IN_DIAGNOSTICS,
        branch=DEMO_BRANCH,
        is_priority=False,
    ),
    JobCreate(
        queue_number=13,
        reg_number="AS-5678-21",
        customer_name="Linda A.",
        service_type="Oil Change (Express)",
        brand="Mitsubishi",
        status=JobStatus.WORK_IN_PROGRESS,
        branch=DEMO_BRANCH,
        is_priority=True,
    ),
)


def seed_demo_data(job_service: JobService, user_service: UserService) -> None:
    """Siembra usuarios y jobs sólo si los almacenes están vacíos.

    Los almacenes que se siembran solos (`seeds_itself`) ya decidieron al
    cargar; aquí sólo se les añaden usuarios.
    """
    if user_service.count() == 0:
        for user in DEMO_USERS:
            user_service.create_user(user)
        logger.info("Seeded %d demo users", len(DEMO_USERS))

    if not job_service.seeds_itself and not job_service.list_jobs():
        for job in DEMO_JOBS:
            job_service.create_job(job)
        logger.info("Seeded %d demo jobs", len(DEMO_JOBS))
