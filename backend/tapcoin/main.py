from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the TapCoin server!',
        'endpoints': {
            'GET /api/user/<id>': 'Progress of one user',
            'POST /api/tap': 'Sync coins earned since the last sync',
            'GET /api/leaderboard': 'Top players by coins',
        },
    })

@main.route('/health')
def health():
    store = current_app.extensions['progress_store']
    return jsonify({'status': 'healthy', 'users': len(store)})
