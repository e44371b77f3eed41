"""Tests for the upload client and background image uploads."""

import asyncio
import base64

import httpx

from sitecanvas.models.session_models import Command, CommandType
from sitecanvas.services.upload_client import ImageUploader, UploadClient, to_data_uri


def test_data_uri():
    assert to_data_uri(b"abc", "image/png") == "data:image/png;base64," + base64.b64encode(b"abc").decode()


def test_inline_upload_without_service():
    response = asyncio.run(UploadClient().upload(b"\x89PNG", "a.png", "image/png"))
    assert response.success is True
    assert response.url.startswith("data:image/png;base64,")


def test_rejects_empty_and_non_image():
    client = UploadClient()
    assert asyncio.run(client.upload(b"", "a.png", "image/png")).success is False
    assert asyncio.run(client.upload(b"x", "a.txt", "text/plain")).success is False


def test_upload_to_service():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json={"url": "https://cdn.example/a.png"})

    async def run():
        client = UploadClient("https://media.example/", transport=httpx.MockTransport(handler))
        try:
            return await client.upload(b"img-bytes", "a.png", "image/png")
        finally:
            await client.close()

    response = asyncio.run(run())
    assert response.success is True
    assert response.url == "https://cdn.example/a.png"
    assert seen["url"] == "https://media.example/api/media/upload"
    assert b"img-bytes" in seen["body"]


def test_service_errors_are_reported_not_raised():
    async def run(handler):
        client = UploadClient("https://media.example", transport=httpx.MockTransport(handler))
        try:
            return await client.upload(b"x", "a.png", "image/png")
        finally:
            await client.close()

    def server_error(request):
        return httpx.Response(500, text="boom")

    def missing_url(request):
        return httpx.Response(200, json={})

    def timeout(request):
        raise httpx.ReadTimeout("slow", request=request)

    assert "HTTP 500" in asyncio.run(run(server_error)).error
    assert asyncio.run(run(missing_url)).success is False
    assert asyncio.run(run(timeout)).error == "Request timed out"


def test_uploader_dispatches_exactly_one_set_image(controller):
    dispatched = []

    def dispatch(command):
        dispatched.append(command)
        return controller.dispatch(command)

    async def run():
        uploader = ImageUploader(UploadClient(), dispatch)
        url = await uploader.start("a", b"png", "a.png", "image/png")
        await uploader.wait()
        return url

    url = asyncio.run(run())
    assert len(dispatched) == 1
    assert dispatched[0].type == CommandType.SET_IMAGE
    assert controller.document.get("a").image_url == url


def test_failed_upload_dispatches_nothing(controller):
    controller.dispatch(Command.set_image("a", "https://old/a.png"))
    dispatched = []

    async def run():
        uploader = ImageUploader(UploadClient(), dispatched.append)
        return await uploader.start("a", b"text", "a.txt", "text/plain")

    assert asyncio.run(run()) is None
    assert dispatched == []
    assert controller.document.get("a").image_url == "https://old/a.png"


def test_last_completed_upload_wins():
    dispatched = []

    async def run():
        uploader = ImageUploader(UploadClient(), dispatched.append)
        uploader.start("a", b"first", "1.png", "image/png")
        uploader.start("a", b"second", "2.png", "image/png")
        return await uploader.wait()

    assert asyncio.run(run()) == 2
    assert len(dispatched) == 2
    assert dispatched[-1].url == to_data_uri(b"second", "image/png")


def test_upload_for_deleted_element_is_not_applied(controller):
    async def run():
        uploader = ImageUploader(UploadClient(), controller.dispatch)
        task = uploader.start("a", b"png", "a.png", "image/png")
        controller.dispatch(Command.delete("a"))
        await task

    asyncio.run(run())
    assert "a" not in controller.document
    assert controller.document.get("b").image_url is None
