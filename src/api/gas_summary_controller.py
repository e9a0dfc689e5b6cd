from api.mapper.gas_summary_mapper import domain_to_api
from api.model.gas_summary_response import GasSummaryResponse
from di.di import DI
from util import log
from util.error_codes import MISSING_ADDRESS
from util.errors import ValidationError


class GasSummaryController:

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def compute_gas_summary(self, address: str | None) -> GasSummaryResponse:
        if not address or not address.strip():
            raise ValidationError("Missing address parameter", MISSING_ADDRESS)
        address = address.strip()
        log.d(f"Computing gas summary for '{address}'")
        result = self.__di.gas_cost_aggregator.execute(address)
        return domain_to_api(result)
