from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_INVOICE_DUE_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .invoices.mysql_invoice_repository import MySQLInvoiceRepository
from .invoices.service import InvoiceService
from .lessons.mysql_lesson_schedule_repository import MySQLLessonScheduleRepository
from .lessons.service import LessonService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.service import PaymentService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService
from .users.mysql_teacher_repository import MySQLTeacherRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    class_service: ClassService
    student_service: StudentService
    lesson_service: LessonService
    attendance_service: AttendanceService
    invoice_service: InvoiceService
    payment_service: PaymentService


def build_container(*, db_config: dict, invoice_due_days: int = DEFAULT_INVOICE_DUE_DAYS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    teachers_repo = MySQLTeacherRepository(conn)
    classes_repo = MySQLClassRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    schedules_repo = MySQLLessonScheduleRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    invoices_repo = MySQLInvoiceRepository(conn)
    payments_repo = MySQLPaymentRepository(conn)

    lesson_service = LessonService(schedules_repo)
    invoice_service = InvoiceService(invoices_repo, schedules_repo, attendance_repo, due_days=invoice_due_days)

    return Container(
        auth_service=AuthService(teachers_repo),
        class_service=ClassService(classes_repo, schedules_repo),
        student_service=StudentService(students_repo, schedules_repo, lesson_service),
        lesson_service=lesson_service,
        attendance_service=AttendanceService(attendance_repo, schedules_repo),
        invoice_service=invoice_service,
        payment_service=PaymentService(payments_repo, invoices_repo, students_repo, invoice_service),
    )
