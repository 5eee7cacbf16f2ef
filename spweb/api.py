import logging

from flask import Flask, jsonify, request

from strongpass.config import GenerationConfig
from strongpass.exceptions import InvalidConfiguration
from strongpass.generator import generate, validate_config
from strongpass.score import score

logger = logging.getLogger(__name__)

app = Flask(__name__)


@app.after_request
def no_store(response):
    # generated secrets must not end up in a cache
    response.headers["Cache-Control"] = "no-store"
    return response


@app.errorhandler(InvalidConfiguration)
def invalid_configuration(e):
    return jsonify({"error": str(e)}), 400


@app.route('/')
def home():
    return jsonify({
        "message": "StrongPass API is running"
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise InvalidConfiguration("request body must be a JSON object")
    config = validate_config(GenerationConfig.from_dict(data))
    password = generate(config)
    logger.debug("Generated password of length %d", len(password))
    return jsonify({'password': password, 'strength': score(password).as_dict()})


@app.route('/score', methods=['POST'])
def score_route():
    data = request.get_json(silent=True) or {}
    password = data.get('password', '') if isinstance(data, dict) else ''
    if not isinstance(password, str):
        raise InvalidConfiguration("password must be a string")
    return jsonify(score(password).as_dict())


if __name__ == "__main__":
    app.run(debug=True)
