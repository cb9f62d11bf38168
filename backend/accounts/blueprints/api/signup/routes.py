"""Sign-up blueprint: creates an account from name, email and password."""
from flask import Blueprint, current_app

from backend.accounts.extensions import limiter
from backend.accounts.main.adapters.flask_route_adapter import adapt_route

signup_bp = Blueprint('signup', __name__)


def _signup_rate_limit() -> str:
    return current_app.config.get('SIGNUP_RATE_LIMIT', '5 per hour')


@signup_bp.route('/signup', methods=['POST'])
@limiter.limit(_signup_rate_limit)
def signup():
    """Register a new account.

    Expects a JSON body with `name`, `email`, `password` and
    `passwordConfirmation`. Responds 200 with the created account, 400
    with a `missing_param` / `invalid_param` error, or 500 with a generic
    `server_error`.
    """
    controller = current_app.extensions['signup_controller']
    return adapt_route(controller)
