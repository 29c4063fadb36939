# services/exceptions.py
"""
Domain errors raised by the service layer.

The app maps each one to an HTTP status with a flat {"error": message} body,
so services never import FastAPI.
"""


class ServiceError(Exception):
     status_code = 400

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message


class BadRequestError(ServiceError):
     status_code = 400


class NotFoundError(ServiceError):
     status_code = 404


class ConflictError(ServiceError):
     status_code = 409


class VersionConflictError(ConflictError):
     def __init__(self, entity: str, expected: int, current: int):
          super().__init__("Version conflict")
          self.entity = entity
          self.expected = expected
          self.current = current
