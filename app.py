from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from flask import Flask, jsonify, request

from qr_symbol import ErrorCorrectLevel, QRSymbol, module_roles
from qr_symbol.generator import symbol_to_dict


@dataclass
class QRRequest:
    data: str
    error_correction: ErrorCorrectLevel
    border: int
    version: Optional[int]
    mask_pattern: Optional[int]
    encoding: str

    @staticmethod
    def _parse_int(raw_value: object, key: str) -> int:
        # JSON floats and booleans would be truncated or coerced by int()
        if isinstance(raw_value, bool) or not isinstance(raw_value, (int, str)):
            raise ValueError(f"{key} must be an integer")
        try:
            return int(raw_value)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer") from exc

    @classmethod
    def _parse_optional_int(cls, payload: Mapping[str, object], key: str, low: int, high: int) -> Optional[int]:
        raw_value = payload.get(key)
        if raw_value in (None, ""):
            return None
        value = cls._parse_int(raw_value, key)
        if not low <= value <= high:
            raise ValueError(f"{key} must be between {low} and {high}")
        return value

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "QRRequest":
        data = str(payload.get("data") or "")
        if not data:
            raise ValueError("data must not be empty")

        error_correction = ErrorCorrectLevel.parse(str(payload.get("errorCorrection") or "M"))

        border = cls._parse_int(payload.get("border", 0), "border")
        if border < 0:
            raise ValueError("border must not be negative")

        return cls(
            data=data,
            error_correction=error_correction,
            border=border,
            version=cls._parse_optional_int(payload, "version", 1, 40),
            mask_pattern=cls._parse_optional_int(payload, "maskPattern", 0, 7),
            encoding=str(payload.get("encoding") or "utf-8"),
        )

    def encode(self) -> QRSymbol:
        return QRSymbol.encode_text(
            self.data,
            self.error_correction,
            encoding=self.encoding,
            version=self.version,
            mask_pattern=self.mask_pattern,
        )


def _request_payload() -> Dict[str, object]:
    if request.method == "GET":
        return {key: value for key, value in request.args.items()}
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        payload = {}
    return payload


def create_app() -> Flask:
    app = Flask(__name__)

    @app.route("/api/qr", methods=["GET", "POST"])
    def qr_matrix():
        try:
            qr_request = QRRequest.from_payload(_request_payload())
            symbol = qr_request.encode()
        except ValueError as exc:
            return jsonify({"message": str(exc)}), 400
        return jsonify(symbol_to_dict(symbol, qr_request.border))

    @app.post("/api/qr/roles")
    def qr_roles():
        try:
            qr_request = QRRequest.from_payload(_request_payload())
            symbol = qr_request.encode()
        except ValueError as exc:
            return jsonify({"message": str(exc)}), 400
        roles = module_roles(symbol)
        return jsonify(
            {
                "version": symbol.version,
                "moduleCount": symbol.module_count,
                "roles": [[role.value for role in row] for row in roles],
            }
        )

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
