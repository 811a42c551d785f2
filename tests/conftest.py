import io

import pytest
from rich.console import Console

from cloudfront_invalidate.dispatcher import Dispatcher
from cloudfront_invalidate.models.context import DeploymentContext


@pytest.fixture
def context():
    return DeploymentContext(stage="dev", service="site")


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def make_dispatcher(context, output, sleeps):
    def factory(client, **kwargs):
        return Dispatcher(
            client=client,
            context=kwargs.pop("context", context),
            console=Console(file=output, width=200),
            sleep=sleeps.append,
            **kwargs,
        )

    return factory
