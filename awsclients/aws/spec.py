"""
Access to the botocore service models, endpoint rule sets and partition data the clients are built from.
"""
import json
import logging
import os
from functools import lru_cache
from typing import Dict, Optional

import jsonpatch
from botocore.loaders import Loader, instance_cache
from botocore.model import ServiceModel

from awsclients.constants import ENDPOINT_RULESET_MODEL_TYPE, PARTITIONS_DATA, SERVICE_MODEL_TYPE

LOG = logging.getLogger(__name__)

ServiceName = str

spec_patches_json = os.path.join(os.path.dirname(__file__), "spec-patches.json")


def load_spec_patches(path: str = spec_patches_json) -> Dict[str, list]:
    if not os.path.exists(path):
        return {}
    with open(path) as fd:
        return json.load(fd)


class PatchingLoader(Loader):
    """
    A botocore Loader which applies JSON patches to the data files as they are loaded. The patches are keyed by the
    name of the data file, f.e. ``route53/2013-04-01/service-2``.
    """

    patches: Dict[str, list]

    def __init__(self, patches: Dict[str, list], *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.patches = patches

    @instance_cache
    def load_data(self, name: str):
        result = super().load_data(name)

        if patches := self.patches.get(name):
            LOG.debug("Applying %d patches to %s", len(patches), name)
            return jsonpatch.apply_patch(result, patches)

        return result


loader = PatchingLoader(load_spec_patches())


@lru_cache(maxsize=64)
def load_service(service: ServiceName, version: Optional[str] = None) -> ServiceModel:
    """
    For example: load_service("route53", "2013-04-01")
    """
    service_description = loader.load_service_model(service, SERVICE_MODEL_TYPE, version)
    return ServiceModel(service_description, service)


def load_endpoint_ruleset(service: ServiceName, version: Optional[str] = None) -> dict:
    """Loads the endpoint rule set (``endpoint-rule-set-1``) of the given service."""
    return loader.load_service_model(service, ENDPOINT_RULESET_MODEL_TYPE, version)


def load_partitions() -> dict:
    """Loads the partition data the endpoint rule sets are evaluated against."""
    return loader.load_data(PARTITIONS_DATA)
