"""
Celery Configuration
"""
from celery import Celery
from celery.schedules import crontab
from fiftyhertz.core.config import settings

# Create Celery app
celery_app = Celery(
    "fiftyhertz",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["fiftyhertz.tasks.sms", "fiftyhertz.tasks.cleanup"],
)

# Configure Celery
celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone=settings.CELERY_TIMEZONE,
    enable_utc=True,

    # Worker settings
    worker_prefetch_multiplier=1,
    task_acks_late=True,

    # Result settings
    result_expires=3600,

    # Task routing
    task_routes={
        'fiftyhertz.tasks.sms.*': {'queue': 'sms'},
        'fiftyhertz.tasks.cleanup.*': {'queue': 'default'},
    },

    # Task time limits
    task_soft_time_limit=60,
    task_time_limit=120,

    # Beat schedule
    beat_schedule={
        'purge-expired-otps-hourly': {
            'task': 'fiftyhertz.tasks.cleanup.purge_expired_otps',
            'schedule': crontab(minute=0, hour='*'),
        },
        'purge-expired-tokens-daily': {
            'task': 'fiftyhertz.tasks.cleanup.purge_expired_tokens',
            'schedule': crontab(hour=3, minute=30),
        },
    },
)
