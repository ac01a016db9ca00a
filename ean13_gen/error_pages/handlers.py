# /ean13_gen/error_pages/handlers.py

# Third-party imports
from flask import Blueprint, render_template, request
from werkzeug.exceptions import NotFound


# Local imports
from ean13_gen import app, log_message

# blueprint router configuration
error_pages = Blueprint("error_pages", __name__)


def _not_found_message(error, incoming_url):
    # Routes that abort with their own description (e.g. a stale copy button) keep it.
    description = getattr(error, "description", None)
    if description and description != NotFound.description:
        return description
    return f"There is no barcode generator page at {incoming_url}."


@error_pages.app_errorhandler(404)
def error_404(error):
    """Error 404 page handler"""
    incoming_url = request.path
    message = _not_found_message(error, incoming_url)
    app.logger.error(log_message(f"404 Error: {message}, URL: {incoming_url}"))
    return render_template("error_pages/404.html", message=message), 404


@error_pages.app_errorhandler(500)
def error_500(error):
    """Error 500 page handler"""
    app.logger.error(log_message(f"Barcode generator failed: {error}"))
    message = "Generating the barcodes failed unexpectedly. Your input was not changed; please try again."
    return render_template("error_pages/500.html", message=message), 500
