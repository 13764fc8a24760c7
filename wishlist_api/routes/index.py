from flask import blueprints, jsonify


index_bp = blueprints.Blueprint('index_bp', __name__)
@index_bp.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'}), 200
