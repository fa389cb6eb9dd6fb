"""User-facing messages returned by the employee endpoints."""

NO_RECORD_ERROR_MESSAGE = "No records found!"
COMMON_ERROR_MESSAGE = "Something went wrong. Please try again later."
VALIDATION_ERROR_MESSAGE = "Validation failed"

ADD_SUCCESS_MESSAGE = "Employee added."
UPDATE_SUCCESS_MESSAGE = "Employee updated."
DELETE_SUCCESS_MESSAGE = "Employee deleted."
