"""
Service wiring - explicit configuration is handed to each service here so
routes never read process state directly. Tests override these providers.
"""
from app.config.database import db_config
from app.config.settings import settings
from app.database.db_operations import DBOperations
from app.services.intake_service import IntakeService
from app.services.notification_service import NotificationService, SmtpMailer
from app.utils.helpers import STUDIO_TZ

def get_db_ops() -> DBOperations:
    return DBOperations(db_config)

def get_mailer() -> SmtpMailer:
    return SmtpMailer(
        hostname=settings.MAIL_HOST,
        port=settings.MAIL_PORT,
        username=settings.MAIL_USER,
        password=settings.MAIL_PASS,
        use_tls=settings.MAIL_USE_TLS,
        timeout=settings.MAIL_TIMEOUT,
    )

def get_intake_service() -> IntakeService:
    notifier = NotificationService(
        mailer=get_mailer(),
        sender=settings.MAIL_USER,
        admin_address=settings.ADMIN_EMAIL,
        tz=STUDIO_TZ,
    )
    return IntakeService(store=get_db_ops(), notifier=notifier)

def get_upload_dir() -> str:
    return settings.UPLOAD_DIR
