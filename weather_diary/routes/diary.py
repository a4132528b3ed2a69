from datetime import datetime
from flask import Blueprint, jsonify, request
from weather_diary.integrations.weather import WeatherParseError
from weather_diary.services.diary_service import DiaryNotFoundError, DiaryService

diary_bp = Blueprint('diary', __name__)
diary_service = DiaryService()


class InvalidDateParam(ValueError):
    pass


def _date_arg(name):
    raw = request.args.get(name)
    if not raw:
        raise InvalidDateParam(f'Missing query parameter "{name}"')
    try:
        return datetime.strptime(raw, '%Y-%m-%d').date()
    except ValueError:
        raise InvalidDateParam(f'Invalid {name}: {raw!r}. Use YYYY-MM-DD') from None


@diary_bp.errorhandler(InvalidDateParam)
def handle_invalid_date(e):
    return jsonify({'error': str(e)}), 400


@diary_bp.errorhandler(DiaryNotFoundError)
def handle_not_found(e):
    return jsonify({'error': str(e)}), 404


@diary_bp.errorhandler(WeatherParseError)
def handle_weather_error(e):
    return jsonify({'error': f'Weather provider returned unusable data: {e}'}), 502


@diary_bp.route('/create/diary', methods=['POST'])
def create_diary():
    """Save a diary entry with the weather for its date."""
    target = _date_arg('date')
    diary = diary_service.create_diary(target, request.get_data(as_text=True))
    return jsonify(diary.to_dict()), 201


@diary_bp.route('/read/diary')
def read_diary():
    """All diary entries for one date."""
    target = _date_arg('date')
    return jsonify([d.to_dict() for d in diary_service.read_diary(target)])


@diary_bp.route('/read/diaries')
def read_diaries():
    """All diary entries between startDate and endDate, inclusive."""
    start = _date_arg('startDate')
    end = _date_arg('endDate')
    return jsonify([d.to_dict() for d in diary_service.read_diaries(start, end)])


@diary_bp.route('/update/diary', methods=['PUT'])
def update_diary():
    target = _date_arg('date')
    diary = diary_service.update_diary(target, request.get_data(as_text=True))
    return jsonify(diary.to_dict())


@diary_bp.route('/delete/diary', methods=['DELETE'])
def delete_diary():
    target = _date_arg('date')
    deleted = diary_service.delete_diary(target)
    return jsonify({'deleted': deleted})
