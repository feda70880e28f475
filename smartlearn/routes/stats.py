from flask import Blueprint, jsonify, g
from smartlearn.classes.stats_manager import StatsManager
from smartlearn.utils.utils import login_required

stats_bp = Blueprint("stats_bp", __name__)


@stats_bp.route("", methods=["GET"])
@login_required
def get_stats():
    return jsonify(StatsManager.user_stats(g.user.id)), 200
