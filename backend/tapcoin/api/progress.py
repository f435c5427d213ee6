from flask import Blueprint, jsonify, request, current_app
from tapcoin import socketio
from tapcoin.services.progress import MalformedPayload, SyncError, decode_tap_request, top_n
from tapcoin.socketio_events import LEADERBOARD_ROOM, user_room


progress = Blueprint('progress', __name__)


@progress.errorhandler(SyncError)
def handle_sync_error(exc):
    return jsonify(exc.to_dict()), exc.status_code


@progress.route('/user/<string:user_id>', methods=['GET'])
def get_user(user_id):
    store = current_app.extensions['progress_store']
    return jsonify(store.view(user_id))


@progress.route('/tap', methods=['POST'])
def tap():
    body = request.get_json(force=True, silent=True)
    if body is None:
        current_app.logger.warning("[tap-rejected] reason=unparseable body")
        raise MalformedPayload()
    tap_request = decode_tap_request(body)

    processor = current_app.extensions['sync_processor']
    record = processor.apply_request(tap_request)
    payload = record.to_dict()

    socketio.emit('progress_update', payload, to=user_room(record.user_id), namespace='/ws')
    socketio.emit(
        'leaderboard_changed',
        {'userId': record.user_id, 'coins': record.total_coins},
        to=LEADERBOARD_ROOM,
        namespace='/ws',
    )
    return jsonify(payload)


@progress.route('/leaderboard', methods=['GET'])
def leaderboard():
    store = current_app.extensions['progress_store']
    size = int(current_app.config.get('LEADERBOARD_SIZE', 100))
    return jsonify(top_n(store, size))


@progress.route('/<path:unknown>', methods=['GET', 'POST'])
def not_found(unknown):
    return jsonify({'error': 'Not found'}), 404
