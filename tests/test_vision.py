"""TDD: AzureVisionClient backend tests written FIRST"""
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from azure.cognitiveservices.vision.computervision.models import VisualFeatureTypes
from msrest.exceptions import ClientRequestError

from src.errors import ServiceError
from src.vision.azure import AzureVisionClient, to_analysis_result
from src.vision.client import VisionClient
from src.vision.models import ANALYSIS_FEATURES, AdultRating, AnalysisResult, ScoredItem


def make_sdk_analysis(*, captions=("a cat on a sofa",)) -> SimpleNamespace:
    return SimpleNamespace(
        description=SimpleNamespace(
            captions=[SimpleNamespace(text=t, confidence=0.9) for t in captions]
        ),
        tags=[SimpleNamespace(name="cat", confidence=0.99), SimpleNamespace(name="sofa", confidence=0.8)],
        categories=[SimpleNamespace(name="animal_cat", score=0.875)],
        brands=[SimpleNamespace(name="Ikea", confidence=0.5)],
        objects=[SimpleNamespace(object_property="cat", confidence=0.91)],
        adult=SimpleNamespace(is_adult_content=False, is_racy_content=True, is_gory_content=False),
    )


def make_client() -> tuple[AzureVisionClient, MagicMock]:
    with patch("src.vision.azure.ComputerVisionClient") as mock_cls:
        sdk = MagicMock()
        mock_cls.return_value = sdk
        client = AzureVisionClient("https://vision.example/", "key", timeout=7.5)
    return client, sdk


def test_azure_client_implements_abc():
    assert issubclass(AzureVisionClient, VisionClient)


def test_azure_client_sets_transport_timeout():
    _, sdk = make_client()

    assert sdk.config.connection.timeout == 7.5


async def test_analyze_streams_bytes_with_requested_features():
    client, sdk = make_client()
    sdk.analyze_image_in_stream.return_value = make_sdk_analysis()

    result = await client.analyze(b"jpeg-bytes", ANALYSIS_FEATURES)

    sdk.analyze_image_in_stream.assert_called_once()
    stream = sdk.analyze_image_in_stream.call_args.args[0]
    assert stream.getvalue() == b"jpeg-bytes"
    assert sdk.analyze_image_in_stream.call_args.kwargs["visual_features"] == [
        VisualFeatureTypes.description,
        VisualFeatureTypes.tags,
        VisualFeatureTypes.categories,
        VisualFeatureTypes.brands,
        VisualFeatureTypes.objects,
        VisualFeatureTypes.adult,
    ]
    assert result.captions[0].text == "a cat on a sofa"


async def test_analyze_passes_url_to_service():
    client, sdk = make_client()
    sdk.analyze_image.return_value = make_sdk_analysis()

    await client.analyze("https://example.com/cat.jpg", ANALYSIS_FEATURES)

    assert sdk.analyze_image.call_args.args[0] == "https://example.com/cat.jpg"
    sdk.analyze_image_in_stream.assert_not_called()


async def test_analyze_wraps_sdk_error():
    client, sdk = make_client()
    sdk.analyze_image_in_stream.side_effect = ClientRequestError("connection reset")

    with pytest.raises(ServiceError, match="connection reset"):
        await client.analyze(b"bytes", ANALYSIS_FEATURES)


async def test_thumbnail_from_url_joins_chunks():
    client, sdk = make_client()
    sdk.generate_thumbnail.return_value = iter([b"\xff\xd8", b"rest"])

    data = await client.thumbnail(100, 100, "https://example.com/cat.jpg", True)

    assert data == b"\xff\xd8rest"
    sdk.generate_thumbnail.assert_called_once_with(
        100, 100, "https://example.com/cat.jpg", smart_cropping=True
    )


async def test_thumbnail_from_bytes_uses_stream_endpoint():
    client, sdk = make_client()
    sdk.generate_thumbnail_in_stream.return_value = iter([b"thumb"])

    data = await client.thumbnail(64, 32, b"source", False)

    assert data == b"thumb"
    args = sdk.generate_thumbnail_in_stream.call_args
    assert args.args[:2] == (64, 32)
    assert args.args[2].getvalue() == b"source"
    assert args.kwargs == {"smart_cropping": False}


@pytest.mark.parametrize("width,height", [(0, 100), (100, -1)])
async def test_thumbnail_rejects_non_positive_dimensions(width, height):
    client, sdk = make_client()

    with pytest.raises(ValueError):
        await client.thumbnail(width, height, "https://example.com/cat.jpg", True)

    sdk.generate_thumbnail.assert_not_called()


async def test_thumbnail_wraps_sdk_error():
    client, sdk = make_client()
    sdk.generate_thumbnail.side_effect = ClientRequestError("quota exceeded")

    with pytest.raises(ServiceError, match="quota exceeded"):
        await client.thumbnail(100, 100, "https://example.com/cat.jpg", True)


def test_close_releases_sdk_session():
    client, sdk = make_client()

    client.close()

    sdk.close.assert_called_once()


# ── SDK → AnalysisResult mapping ──────────────────────────────────────────────


def test_to_analysis_result_maps_every_section():
    result = to_analysis_result(make_sdk_analysis())

    assert [t.name for t in result.tags] == ["cat", "sofa"]
    assert result.categories == (ScoredItem(name="animal_cat", confidence=0.875),)
    assert result.brands == (ScoredItem(name="Ikea", confidence=0.5),)
    assert result.objects == (ScoredItem(name="cat", confidence=0.91),)
    assert result.adult == AdultRating(is_adult=False, is_racy=True, is_gory=False)


def test_to_analysis_result_tolerates_missing_sections():
    sdk = SimpleNamespace(description=None, tags=None, categories=None, brands=None, objects=None, adult=None)

    assert to_analysis_result(sdk) == AnalysisResult()
