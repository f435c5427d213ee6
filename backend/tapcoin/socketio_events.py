from flask_socketio import join_room, leave_room, emit
from tapcoin import socketio

LEADERBOARD_ROOM = 'leaderboard'


def user_room(user_id) -> str:
    return f"user:{user_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def _user_id(data):
    user_id = (data or {}).get('userId')
    if isinstance(user_id, int) and not isinstance(user_id, bool):
        user_id = str(user_id)
    if not isinstance(user_id, str) or not user_id:
        emit('error', {'message': 'userId is required'})
        return None
    return user_id


def handle_watch_user(data):
    user_id = _user_id(data)
    if user_id is None:
        return
    room = user_room(user_id)
    join_room(room)
    emit('watching', {'room': room})


def handle_unwatch_user(data):
    user_id = _user_id(data)
    if user_id is None:
        return
    room = user_room(user_id)
    leave_room(room)
    emit('unwatched', {'room': room})


def handle_watch_leaderboard(data=None):
    join_room(LEADERBOARD_ROOM)
    emit('watching', {'room': LEADERBOARD_ROOM})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('watch_user', handle_watch_user, namespace='/ws')
    socketio.on_event('unwatch_user', handle_unwatch_user, namespace='/ws')
    socketio.on_event('watch_leaderboard', handle_watch_leaderboard, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
