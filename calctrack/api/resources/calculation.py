# calctrack/api/resources/calculation.py
from flask_restful import Resource, marshal

from ...services.record_service import CalculationService
from ..fields import calculation_fields
from ..middleware import session_required
from ..parsers import calculation_parser, parse_body


class CalculationList(Resource):
    method_decorators = [session_required]

    def get(self, current_user):
        """Controller: List the caller's calculations"""
        calculations = CalculationService().list_for(current_user)
        return marshal(calculations, calculation_fields), 200

    def post(self, current_user):
        """Controller: Save a calculation owned by the caller"""
        args = parse_body(calculation_parser(), "Invalid calculation data")
        calculation = CalculationService().create_for(current_user, args)
        return marshal(calculation, calculation_fields), 200


class CalculationItem(Resource):
    method_decorators = [session_required]

    def get(self, calculation_id, current_user):
        calculation = CalculationService().get_owned(current_user, calculation_id)
        return marshal(calculation, calculation_fields), 200

    def put(self, calculation_id, current_user):
        """Controller: Merge the fields sent into an owned calculation"""
        changes = parse_body(calculation_parser(partial=True), "Invalid calculation data")
        calculation = CalculationService().update_owned(current_user, calculation_id, changes)
        return marshal(calculation, calculation_fields), 200

    def delete(self, calculation_id, current_user):
        CalculationService().delete_owned(current_user, calculation_id)
        return {"message": "Calculation deleted"}, 200
