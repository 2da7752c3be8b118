from flask import Blueprint, redirect, url_for

home_bp = Blueprint('home', __name__)


@home_bp.route('/', methods=['GET'])
def home():
    return redirect(url_for('items.index'))
