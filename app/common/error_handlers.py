from flask import render_template
from werkzeug.exceptions import HTTPException

def register_error_handlers(app):
    @app.errorhandler(Exception)
    def handle_exception(e):
        # Handle HTTP (e.g. 404, 405)
        if isinstance(e, HTTPException):
            app.logger.warning(f"{e.code} {e.name}: {e.description}")
            return render_template(
                "error.html",
                title=e.name,
                message=e.description,
                status_code=e.code,
            ), e.code

        # Handle all other exceptions (coding, DB errors, etc.)
        app.logger.exception("Unhandled exception occurred")
        return render_template(
            "error.html",
            title="Internal Server Error",
            message=str(e),
            status_code=500,
        ), 500
