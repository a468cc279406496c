"""Uniform response envelope: {success, message?, data?, errors?, pagination?}."""

from flask import current_app, jsonify, request


def success(data=None, message=None, status=200, pagination=None):
    body = {'success': True}
    if message:
        body['message'] = message
    if data is not None:
        body['data'] = data
    if pagination is not None:
        body['pagination'] = {
            'current': pagination.page,
            'pages': pagination.pages,
            'total': pagination.total,
        }
    return jsonify(body), status


def failure(error):
    """Render a ServiceError."""
    return jsonify(error.to_dict()), error.status_code


# largest OFFSET every supported database accepts as an integer
MAX_OFFSET = 2 ** 31 - 1


def page_args(default_per_page):
    """Read ``page`` and ``limit`` query args, clamped to sane bounds.

    Pages far past the end stay empty instead of overflowing the OFFSET.
    """
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('limit', default_per_page, type=int)
    max_per_page = current_app.config.get('MAX_PAGE_SIZE', 100)
    per_page = max(1, min(per_page, max_per_page))
    last_page = MAX_OFFSET // per_page + 1
    return min(max(page, 1), last_page), per_page
