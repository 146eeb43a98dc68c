from flask import Blueprint, jsonify, render_template, current_app
import sqlite3
import database

admin_bp = Blueprint('admin', __name__)


def get_hit_counter():
    return current_app.extensions['hit_counter']


@admin_bp.route('/metrics', methods=['GET'])
def admin_metrics():
    """Renders the visit count page."""
    return render_template('metrics.html', hits=get_hit_counter().value())


@admin_bp.route('/reset', methods=['POST'])
def reset_metrics():
    """Zeroes the hit counter. In dev it also wipes every user (and their chirps)."""
    get_hit_counter().reset()

    if current_app.config['PLATFORM'] == 'dev':
        try:
            removed = database.delete_users()
        except sqlite3.Error as e:
            current_app.logger.error("Couldn't delete users: %s", e)
            return jsonify({"error": "Couldn't delete users"}), 500
        current_app.logger.info("Reset removed %d users", removed)

    return "Hits reset to 0", 200, {"Content-Type": "text/plain; charset=utf-8"}
