from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="api_backup_export")
    def api_backup_export():
        filename = container.backup_service.backup_filename()
        return Response(
            container.backup_service.export_json(),
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/backup", methods=["POST"], endpoint="api_backup_import")
    def api_backup_import():
        upload = request.files.get("file")
        text = upload.read() if upload else request.get_data()
        state = container.backup_service.import_json(text)
        return jsonify({"success": True, "months": len(state.monthly_data)})
