"""도메인 오류 카탈로그.

Domain error catalog. One namespace class per aggregate; every entry is
an immutable DomainError value so services can return them directly.
"""

from carrental.domain.result import DomainError, ErrorKind


class ReservationErrors:
    """예약 관련 오류 (Reservation errors)."""

    NOT_FOUND = DomainError(
        ErrorKind.NOT_FOUND,
        "reservation.not_found",
        "Reservation not found",
        "The requested reservation does not exist.",
    )
    INVALID_PERIOD = DomainError(
        ErrorKind.INVALID_PERIOD,
        "reservation.invalid_period",
        "Invalid reservation period",
        "The start of the period must be earlier than its end.",
    )
    START_DATE_IN_PAST = DomainError(
        ErrorKind.INVALID_PERIOD,
        "reservation.start_date_in_past",
        "Invalid reservation start date",
        "The reservation start date must be in the future.",
    )
    INVALID_STATUS_TRANSITION = DomainError(
        ErrorKind.INVALID_STATUS_TRANSITION,
        "reservation.invalid_status_transition",
        "Invalid reservation status transition",
        "The requested reservation status transition is not allowed.",
    )
    INVALID_TIMESTAMP = DomainError(
        ErrorKind.INVALID_TIMESTAMP,
        "reservation.invalid_timestamp",
        "Invalid timestamp",
        "The timestamp is earlier than the reservation creation time.",
    )
    NO_CATEGORY_CAPACITY = DomainError(
        ErrorKind.CONFLICT,
        "reservation.no_category_capacity",
        "No car category capacity",
        "There are no cars in the selected category.",
    )
    OVER_CAPACITY = DomainError(
        ErrorKind.CONFLICT,
        "reservation.over_capacity",
        "Reservation conflict",
        "All cars of the selected category are already reserved in the selected period.",
    )


class RentalErrors:
    """대여 관련 오류 (Rental errors)."""

    NOT_FOUND = DomainError(
        ErrorKind.NOT_FOUND,
        "rental.not_found",
        "Rental not found",
        "The requested rental does not exist.",
    )
    INVALID_STATUS_TRANSITION = DomainError(
        ErrorKind.INVALID_STATUS_TRANSITION,
        "rental.invalid_status_transition",
        "Invalid rental status transition",
        "The rental has already been returned.",
    )
    INVALID_TIMESTAMP = DomainError(
        ErrorKind.INVALID_TIMESTAMP,
        "rental.invalid_timestamp",
        "Invalid timestamp",
        "The return time must not be earlier than the pickup time.",
    )
    INVALID_FUEL_LEVEL = DomainError(
        ErrorKind.INVALID_FUEL_LEVEL,
        "rental.invalid_fuel_level",
        "Invalid fuel level",
        "The fuel level must be one of empty, quarter, half, three_quarters or full (0-4).",
    )
    INVALID_KM = DomainError(
        ErrorKind.INVALID_KM,
        "rental.invalid_km",
        "Invalid kilometer value",
        "Kilometers must be a non-negative integer and must not decrease on return.",
    )
    INVALID_RESERVATION = DomainError(
        ErrorKind.INVALID_RESERVATION,
        "rental.invalid_reservation",
        "Invalid reservation reference",
        "The reservation does not exist or is not confirmed.",
    )
    INVALID_CAR = DomainError(
        ErrorKind.INVALID_CAR,
        "rental.invalid_car",
        "Invalid car reference",
        "The car does not exist, is not available or does not match the reserved category.",
    )
    INVALID_CUSTOMER = DomainError(
        ErrorKind.INVALID_CUSTOMER,
        "rental.invalid_customer",
        "Invalid customer reference",
        "The customer does not match the reservation.",
    )


class CarErrors:
    """차량 관련 오류 (Car errors)."""

    NOT_FOUND = DomainError(
        ErrorKind.NOT_FOUND,
        "car.not_found",
        "Car not found",
        "The requested car does not exist.",
    )
    INVALID_STATUS_TRANSITION = DomainError(
        ErrorKind.INVALID_STATUS_TRANSITION,
        "car.invalid_status_transition",
        "Invalid car status transition",
        "The requested car status transition is not allowed.",
    )
    LICENSE_PLATE_EXISTS = DomainError(
        ErrorKind.CONFLICT,
        "car.license_plate_exists",
        "Duplicate license plate",
        "A car with this license plate already exists.",
    )
    INVALID_LICENSE_PLATE = DomainError(
        ErrorKind.VALIDATION,
        "car.invalid_license_plate",
        "Invalid license plate",
        "License plates may only contain uppercase letters, digits and hyphens.",
    )
    REQUIRED_FIELD = DomainError(
        ErrorKind.VALIDATION,
        "car.required_field",
        "Missing car data",
        "Manufacturer, model and license plate are required.",
    )


class CustomerErrors:
    """고객 관련 오류 (Customer errors)."""

    NOT_FOUND = DomainError(
        ErrorKind.NOT_FOUND,
        "customer.not_found",
        "Customer not found",
        "The requested customer does not exist.",
    )
    EMAIL_EXISTS = DomainError(
        ErrorKind.CONFLICT,
        "customer.email_exists",
        "Duplicate email",
        "A customer with this email already exists.",
    )
    REQUIRED_FIELD = DomainError(
        ErrorKind.VALIDATION,
        "customer.required_field",
        "Missing customer data",
        "First name, last name and email are required.",
    )
    INVALID = DomainError(
        ErrorKind.INVALID_CUSTOMER,
        "customer.invalid",
        "Invalid customer reference",
        "The customer does not exist or is blocked.",
    )


class EmployeeErrors:
    """직원 관련 오류 (Employee errors)."""

    NOT_FOUND = DomainError(
        ErrorKind.NOT_FOUND,
        "employee.not_found",
        "Employee not found",
        "The requested employee does not exist.",
    )
    REQUIRED_FIELD = DomainError(
        ErrorKind.VALIDATION,
        "employee.required_field",
        "Missing employee data",
        "First name, last name, email and personnel number are required.",
    )
    PERSONNEL_NUMBER_EXISTS = DomainError(
        ErrorKind.CONFLICT,
        "employee.personnel_number_exists",
        "Duplicate personnel number",
        "An employee with this personnel number already exists.",
    )
    EMAIL_EXISTS = DomainError(
        ErrorKind.CONFLICT,
        "employee.email_exists",
        "Duplicate email",
        "An employee with this email already exists.",
    )
    INVALID_ADMIN_RIGHTS = DomainError(
        ErrorKind.VALIDATION,
        "employee.invalid_admin_rights",
        "Invalid admin rights",
        "The admin rights value contains undefined flag bits.",
    )
    ALREADY_DEACTIVATED = DomainError(
        ErrorKind.INVALID_STATUS_TRANSITION,
        "employee.already_deactivated",
        "Employee already deactivated",
        "The employee is already deactivated.",
    )
