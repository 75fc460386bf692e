from __future__ import annotations

import logging

from flask import Blueprint, Flask, redirect, render_template, request, url_for

from ..common.datetime_utils import format_value
from ..core.constants import TRANSIENT_ERROR_MESSAGE
from ..core.exceptions import ConstraintViolation, NotFoundError, ReferentialBlock, TransientStoreError, ValidationError
from .service import RecordService

logger = logging.getLogger(__name__)


def register_entity(app: Flask, container, service: RecordService) -> None:
    """Mount the five CRUD routes of one entity under its url prefix."""

    entity = service.entity
    bp = Blueprint(entity.name, __name__, url_prefix=entity.url_prefix)
    key_rule = entity.key_rule()

    def back_to_list(**message):
        return redirect(url_for(f"{entity.name}.view", **message))

    def render_form(form, errors, *, editing: bool, key=None, status: int = 200):
        fields = entity.form_fields(editing=editing)
        options = {name: container.lookups.options(name) for name in entity.option_sets(editing=editing)}
        return (
            render_template(
                "crud/form.html",
                entity=entity,
                fields=fields,
                form=form,
                errors=errors,
                options=options,
                editing=editing,
                key_args=entity.key_args_of(key) if key is not None else {},
            ),
            status,
        )

    @bp.route("/view", endpoint="view")
    def view():
        rows = service.list(request.args)
        return render_template(
            "crud/list.html",
            entity=entity,
            rows=rows,
            filters={name: request.args.get(name, "") for name in entity.filters},
            success=request.args.get("success"),
            error=request.args.get("error"),
        )

    @bp.route(f"/details/{key_rule}", endpoint="details")
    def details(**key_args):
        key = entity.key_from(key_args)
        try:
            record = service.get(key)
        except NotFoundError as e:
            return back_to_list(error=str(e))
        return render_template("crud/details.html", entity=entity, record=record)

    @bp.route("/add", methods=["GET", "POST"], endpoint="add")
    def add():
        if request.method == "GET":
            form = {f.name: format_value(f.default) for f in entity.form_fields(editing=False)}
            return render_form(form, [], editing=False)

        try:
            service.create(request.form)
        except ValidationError as e:
            return render_form(request.form, e.errors, editing=False)
        except ConstraintViolation as e:
            return render_form(request.form, [str(e)], editing=False)
        except TransientStoreError:
            return render_form(request.form, [TRANSIENT_ERROR_MESSAGE], editing=False, status=503)
        return back_to_list(success=f"{entity.singular} added successfully")

    @bp.route(f"/edit/{key_rule}", methods=["GET", "POST"], endpoint="edit")
    def edit(**key_args):
        key = entity.key_from(key_args)
        if request.method == "GET":
            try:
                record = service.get(key)
            except NotFoundError as e:
                return back_to_list(error=str(e))
            return render_form(entity.to_form(record), [], editing=True, key=key)

        try:
            service.update(key, request.form)
        except NotFoundError as e:
            return back_to_list(error=str(e))
        except ValidationError as e:
            return render_form(request.form, e.errors, editing=True, key=key)
        except ConstraintViolation as e:
            return render_form(request.form, [str(e)], editing=True, key=key)
        except TransientStoreError:
            return render_form(request.form, [TRANSIENT_ERROR_MESSAGE], editing=True, key=key, status=503)
        return back_to_list(success=f"{entity.singular} updated successfully")

    @bp.route(f"/delete/{key_rule}", methods=["GET", "POST"], endpoint="delete")
    def delete(**key_args):
        key = entity.key_from(key_args)
        if request.method == "GET":
            try:
                record = service.get(key)
            except NotFoundError as e:
                return back_to_list(error=str(e))
            return render_template("crud/delete.html", entity=entity, record=record, key_args=key_args)

        try:
            service.delete(key)
        except (NotFoundError, ReferentialBlock) as e:
            return back_to_list(error=str(e))
        except TransientStoreError:
            return back_to_list(error=TRANSIENT_ERROR_MESSAGE)
        return back_to_list(success=f"{entity.singular} deleted successfully")

    app.register_blueprint(bp)
    logger.debug("Registered %s routes under %s", entity.name, entity.url_prefix)
