import os
from flask import Blueprint, current_app, send_from_directory

app_bp = Blueprint('fileserver', __name__)


@app_bp.before_request
def count_hit():
    # Every request under /app/ counts, found or not
    current_app.extensions['hit_counter'].increment()


@app_bp.route('/', defaults={'filename': ''})
@app_bp.route('/<path:filename>')
def serve_file(filename):
    """Serves FILESERVER_ROOT, falling back to index.html for directories."""
    root = os.path.abspath(current_app.config['FILESERVER_ROOT'])
    if filename == '' or os.path.isdir(os.path.join(root, filename)):
        filename = os.path.join(filename, 'index.html')
    # send_from_directory refuses paths that escape root and 404s on missing files
    return send_from_directory(root, filename)
