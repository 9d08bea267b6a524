from flask import current_app, jsonify
from storebuilder.domain.invariants.exceptions import InvariantViolation
from storebuilder.domain.sections.exceptions import (
    SectionError,
    StorageUnavailable,
    UnknownPageType,
    UnknownSectionType,
)


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(SectionError)
    def handle_section_error(error):
        if isinstance(error, (UnknownSectionType, UnknownPageType)):
            current_app.logger.error("Rejected unknown type: %s", error.message)
        elif isinstance(error, StorageUnavailable):
            current_app.logger.error("Storage failure during %s", error.operation)
        else:
            current_app.logger.info("Rejected section operation: %s", error.message)

        response = jsonify({
            "error": error.code,
            "message": error.message
        })
        response.status_code = error.status_code
        return response
