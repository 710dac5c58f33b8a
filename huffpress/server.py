"""
server.py

HTTP front end for the huffman codec. Clients post text to /compress and
receive the container as base64; posting that base64 to /decompress
returns the original text.
"""

import base64
import binascii
import logging

from flask import Flask, request, jsonify

from .config_loader import load_config
from .errors import HuffmanError
from .huffman import HuffmanCompressor

logger = logging.getLogger(__name__)


def create_app(config=None):
    """
    Builds the Flask application.

    Parameters:
    config (dict, optional): Configuration as returned by load_config.
    Loaded from the default locations when omitted.

    Returns:
    Flask: The application with all routes registered.
    """
    config = config or load_config()
    app = Flask(__name__)
    app.config["HUFFPRESS"] = config
    compressor = HuffmanCompressor(encoding=config["codec"]["encoding"])

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/compress", methods=["POST"])
    def compress():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        text = data.get("text")
        if not isinstance(text, str):
            return jsonify({"error": "Field 'text' must be a string"}), 400

        try:
            compressed = compressor.compress(text)
        except HuffmanError as e:
            logger.warning("Compression rejected: %s", e)
            return jsonify({"error": str(e)}), 400

        return jsonify({
            "data": base64.b64encode(compressed).decode("ascii"),
            "original_size": len(text.encode(compressor.encoding)),
            "compressed_size": len(compressed),
        })

    @app.route("/decompress", methods=["POST"])
    def decompress():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        encoded = data.get("data")
        if not isinstance(encoded, str):
            return jsonify({"error": "Field 'data' must be a base64 string"}), 400

        try:
            container = base64.b64decode(encoded, validate=True)
        except binascii.Error:
            return jsonify({"error": "Field 'data' is not valid base64"}), 400

        try:
            text = compressor.decompress(container)
        except HuffmanError as e:
            logger.warning("Decompression rejected: %s", e)
            return jsonify({"error": str(e)}), 400

        return jsonify({"text": text})

    return app


def main():
    config = load_config()
    logging.basicConfig(level=config["logging"]["level"])
    app = create_app(config)
    app.run(host=config["server"]["host"], port=config["server"]["port"])


if __name__ == '__main__':
    main()
