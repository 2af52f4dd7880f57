from django.apps import AppConfig
from django.conf import settings
from django.db import connection


class CvDashboardConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cv_dashboard"
    verbose_name = "CV dashboard"

    def ready(self) -> None:
        from .deletion import DEFAULT_GRACE_PERIOD, DeletionCoordinator
        from .scheduler import TimerScheduler
        from .store import CVStore

        store = CVStore()

        def delete_on_timer_thread(cv_id):
            # Timer threads get their own connection; release it once done.
            try:
                store.delete(cv_id)
            finally:
                connection.close()

        self.store = store
        self.deletion_coordinator = DeletionCoordinator(
            delete_on_timer_thread,
            TimerScheduler(),
            grace_period=getattr(settings, "CV_DELETE_GRACE_PERIOD", DEFAULT_GRACE_PERIOD),
        )
