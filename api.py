"""Lightweight HTTP API for report table extraction.

Exposes:
- GET  /api/reports/health   → health check
- POST /api/reports/upload   → accept one or more .txt uploads and ingest their rows
- GET  /api/reports/records  → current filtered and sorted view
- POST /api/reports/filter   → set the substring filter of one column
- POST /api/reports/sort     → cycle the sort direction of one column
- POST /api/reports/clear    → drop all records, filters and sort
- GET  /api/reports/export   → current view as a CSV download
"""

import os

from flask import Flask, Response, jsonify, request

from report_extractor import ReportExtractionPipeline
from report_extractor.exporter import HEADERS, default_export_name, records_to_csv
from report_extractor.utils import setup_logger

app = Flask(__name__)
logger = setup_logger("report_extractor.api")

# Single process-wide collection, like the one table of the upload page
pipeline = ReportExtractionPipeline()


@app.after_request
def add_cors_headers(response):
    """Simple CORS headers for dev usage."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def store_state():
    """Tell an empty result apart from nothing uploaded yet."""
    if not pipeline.store.has_ingested:
        return "not_loaded"
    return "loaded" if len(pipeline.store) else "empty"


def view_payload():
    store = pipeline.store
    records = store.view()
    sort = store.sort_config
    return {
        "state": store_state(),
        "total": len(store),
        "count": len(records),
        "filters": {column.value: pattern for column, pattern in store.filters.items()},
        "sort": {
            "column": sort.column.value if sort.column else None,
            "direction": sort.direction.value,
        },
        "columns": HEADERS,
        "records": [record.to_dict() for record in records],
    }


def json_body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


@app.route("/api/reports/health", methods=["GET"])
def healthcheck():
    return jsonify({"status": "ok"}), 200


@app.route("/api/reports/upload", methods=["POST"])
def upload_reports():
    files = request.files.getlist("file")
    if not files:
        return jsonify({"error": "file is required (multipart/form-data with 'file' field)"}), 400

    results = []
    for upload in files:
        filename = (upload.filename or "").strip()
        if not filename:
            results.append({"source": None, "status": "skipped", "records": 0, "error": "file name is empty"})
            continue
        if not pipeline.loader.is_supported(filename):
            results.append({"source": filename, "status": "skipped", "records": 0,
                            "error": "only .txt files are accepted"})
            continue

        try:
            text = pipeline.loader.decode(upload.read(), filename)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file {filename}: {e}")
            results.append({"source": filename, "status": "error", "records": 0, "error": str(e)})
            continue

        results.append(pipeline.process_text(text, filename).to_dict())

    return jsonify({"status": "ok", "documents": results, "total": len(pipeline.store)}), 200


@app.route("/api/reports/records", methods=["GET"])
def list_records():
    return jsonify(view_payload()), 200


@app.route("/api/reports/filter", methods=["POST"])
def set_filter():
    body = json_body()
    if "column" not in body:
        return jsonify({"error": "column is required"}), 400
    try:
        pipeline.store.set_filter(body["column"], str(body.get("pattern") or ""))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(view_payload()), 200


@app.route("/api/reports/sort", methods=["POST"])
def cycle_sort():
    body = json_body()
    if "column" not in body:
        return jsonify({"error": "column is required"}), 400
    try:
        pipeline.store.cycle_sort(body["column"])
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(view_payload()), 200


@app.route("/api/reports/clear", methods=["POST"])
def clear_records():
    pipeline.clear()
    return jsonify(view_payload()), 200


@app.route("/api/reports/export", methods=["GET"])
def export_csv():
    records = pipeline.store.view()
    if not records:
        return jsonify({"error": "no records to export"}), 404
    filename = default_export_name(prefix=pipeline.config.export_prefix)
    return Response(
        records_to_csv(records),
        mimetype="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


if __name__ == "__main__":
    host = os.environ.get("API_HOST", "0.0.0.0")
    port = int(os.environ.get("API_PORT", "5000"))
    app.run(host=host, port=port)
