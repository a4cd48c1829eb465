import logging

from flask import Flask, jsonify, request
from keysmith.errors import PasswordGenerationError
from keysmith.generator import GenerationOptions, PasswordGenerator

logger = logging.getLogger(__name__)

MAX_COUNT = 50

app = Flask(__name__)
generator = PasswordGenerator()

def _bad_request(kind, message):
    return jsonify({"error": kind, "message": message}), 400

@app.route('/')
def home():
    return jsonify({
        "message": "Keysmith API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return _bad_request("BadRequest", "JSON body must be an object")
    count = data.get('count')
    if count is not None and (not isinstance(count, int) or isinstance(count, bool) or not 1 <= count <= MAX_COUNT):
        return _bad_request("BadRequest", f"count must be an integer between 1 and {MAX_COUNT}")

    try:
        options = GenerationOptions.from_mapping(data)
        passwords = [generator.generate(options) for _ in range(count or 1)]
    except PasswordGenerationError as e:
        logger.info("rejected generate request: %s", e)
        return _bad_request(e.kind, str(e))

    if count is None:
        return jsonify({'password': passwords[0]})
    return jsonify({'passwords': passwords})

if __name__ == "__main__":
    app.run(debug=True)
