from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, send_from_directory, url_for

from ..auth.decorators import make_admin_required
from ..core.constants import APP_TITLE, HTML_LIST_LIMIT
from ..core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def _form_fields() -> dict:
    return {
        "first_name": request.form.get("first_name", ""),
        "last_name": request.form.get("last_name", ""),
        "personal_email": request.form.get("personal_email", ""),
        "age": request.form.get("age", ""),
        "diploma": request.form.get("diploma", ""),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service
    admin_required = make_admin_required(container.auth_service)

    def error_page(message: str, status: int):
        return render_template("errors.html", title="Error", error_message=message), status

    @app.route("/styles.css", endpoint="styles")
    def styles():
        return send_from_directory(app.static_folder, "styles.css", mimetype="text/css")

    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html", title=f"Welcome to {APP_TITLE}")

    @app.route("/list/employees", endpoint="list_employees")
    @admin_required
    def list_employees():
        try:
            page = service.list_page(1, HTML_LIST_LIMIT)
        except DomainError as e:
            logger.error("Error fetching employees: %s", e)
            return error_page("Error fetching employees", 500)
        return render_template("employees.html", title="List Employees", employees=page.items)

    @app.route("/new/employee", endpoint="new_employee")
    @admin_required
    def new_employee():
        return render_template("new_employee.html", title="Personal Details", form={})

    @app.route("/save/employee", methods=["POST"], endpoint="save_employee")
    @admin_required
    def save_employee():
        fields = _form_fields()
        try:
            employee = service.create(**fields)
        except ValidationError as e:
            flash(str(e), "danger")
            return render_template("new_employee.html", title="Personal Details", form=fields), 400
        except ConflictError as e:
            logger.warning("%s", e)
            return error_page(str(e), 409)
        except DomainError as e:
            logger.error("Error saving employee: %s", e)
            return error_page("Error saving employee", 500)

        return render_template("save_result.html", title="Personal Details", employee=employee)

    @app.route("/select/employee/<employee_id>", endpoint="select_employee")
    @admin_required
    def select_employee(employee_id: str):
        try:
            employee = service.get(employee_id)
        except NotFoundError:
            return error_page("Employee not found", 404)
        except DomainError as e:
            logger.error("Error loading employee %s: %s", employee_id, e)
            return error_page("Error loading employee", 500)
        return render_template("employee.html", title="Employee", employee=employee)

    @app.route("/edit/employee/<employee_id>", endpoint="edit_employee")
    @admin_required
    def edit_employee(employee_id: str):
        try:
            employee = service.get(employee_id)
        except NotFoundError:
            return error_page("Employee not found", 404)
        except DomainError as e:
            logger.error("Error loading employee %s: %s", employee_id, e)
            return error_page("Error loading employee", 500)
        return render_template("edit_form.html", title="Edit Employee", employee=employee)

    @app.route("/update/employee", methods=["POST"], endpoint="update_employee")
    @admin_required
    def update_employee():
        employee_id = request.form.get("id", "")
        try:
            service.edit(employee_id, **_form_fields())
            flash("Employee updated.", "success")
        except NotFoundError:
            return error_page("Employee not found", 404)
        except (ValidationError, ConflictError) as e:
            flash(str(e), "danger")
            return redirect(url_for("edit_employee", employee_id=employee_id))
        except DomainError as e:
            logger.error("Error updating employee %s: %s", employee_id, e)
            return error_page("Error updating employee", 500)
        return redirect(url_for("list_employees"))

    @app.route("/delete/employee/<employee_id>", methods=["GET", "POST"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        if request.method == "GET":
            try:
                employee = service.get(employee_id)
            except NotFoundError:
                return error_page("Employee not found", 404)
            except DomainError as e:
                logger.error("Error loading employee %s: %s", employee_id, e)
                return error_page("Error loading employee", 500)
            return render_template("delete_confirmation.html", title="Delete Employee", employee=employee)

        try:
            if service.delete(employee_id):
                flash("Employee deleted.", "success")
            else:
                flash("Employee was already deleted.", "info")
        except DomainError as e:
            logger.error("Error deleting employee %s: %s", employee_id, e)
            return error_page("Error deleting employee", 500)
        return redirect(url_for("list_employees"))

    @app.route("/onboard/employee", methods=["POST"], endpoint="onboard_employee")
    @admin_required
    def onboard_employee():
        employee_id = request.form.get("id", "")
        try:
            employee = service.onboard(employee_id)
            flash(f"{employee.full_name} onboarded as {employee.handle}.", "success")
        except NotFoundError:
            return error_page("Employee not found", 404)
        except (ValidationError, ConflictError) as e:
            flash(str(e), "warning")
        except DomainError as e:
            logger.error("Error onboarding employee %s: %s", employee_id, e)
            return error_page("Error updating employee", 500)
        return redirect(url_for("select_employee", employee_id=employee_id))

    @app.route("/securepassword/employee", methods=["POST"], endpoint="secure_password")
    @admin_required
    def secure_password():
        employee_id = request.form.get("id", "")
        try:
            service.secure_password(employee_id)
            flash("Password secured.", "success")
        except NotFoundError:
            return error_page("Employee not found", 404)
        except ValidationError as e:
            flash(str(e), "warning")
        except DomainError as e:
            logger.error("Error securing password of %s: %s", employee_id, e)
            return error_page("Error updating employee", 500)
        return redirect(url_for("select_employee", employee_id=employee_id))
