from .department import Department
from .faculty import Faculty
from .student import Student
from .course import Course
from .enrollment import Enrollment
from .exam import Exam
from .sequence import Sequence
from .backup_log import BackupLog
__all__ = ["Department", "Faculty", "Student", "Course", "Enrollment", "Exam", "Sequence", "BackupLog"]
