"""
Roster Backend — Student Route Handlers
========================================

What:  GET /student/{student}/detail and GET /student/by-number/{student}/detail.
How:   The {student} segment is bound to a Student by the route binding
       layer; handlers only serialize what they are given.

Before binding, the detail route took {studentId}, called a service that
raised a custom "student not found" exception, and wrapped the result in
{"data": [...]}. Now the binding owns the lookup and the 404, and the
student is returned at the top level of the body.
"""

from fastapi import APIRouter, Depends

from roster.models.student import Student
from roster.routes.binding import bind, bindings
from roster.schemas.student import ErrorResponse, NotFoundResponse, StudentResponse

bindings.register(Student)

router = APIRouter(tags=["Students"])


@router.get(
    "/student/{student}/detail",
    response_model=StudentResponse,
    responses={
        200: {"description": "Student details", "model": StudentResponse},
        404: {"description": "No student with this id", "model": NotFoundResponse},
        500: {"description": "Datastore unavailable", "model": ErrorResponse},
    },
    summary="Get a student by id",
)
async def show_student(student: Student = Depends(bind("student"))) -> StudentResponse:
    return StudentResponse.model_validate(student)


@router.get(
    "/student/by-number/{student}/detail",
    response_model=StudentResponse,
    responses={
        200: {"description": "Student details", "model": StudentResponse},
        404: {"description": "No student with this number", "model": NotFoundResponse},
        500: {"description": "Datastore unavailable", "model": ErrorResponse},
    },
    summary="Get a student by registrar number",
)
async def show_student_by_number(
    student: Student = Depends(bind("student", field="student_number")),
) -> StudentResponse:
    """
    Same binding, keyed on the alternate unique column.

    Example:
        GET /student/by-number/S-2024-0007/detail
    """
    return StudentResponse.model_validate(student)
