from aiohttp import web

from services.scrape_service import ScrapeService

SCRAPE_SERVICE = web.AppKey("scrape_service", ScrapeService)

routes = web.RouteTableDef()


@routes.get("/scrape/{platform}")
async def handle_scrape(request: web.Request) -> web.Response:
    service = request.app[SCRAPE_SERVICE]
    result = await service.scrape(request.match_info["platform"])
    return web.json_response(result)


@routes.get("/status")
async def handle_status(request: web.Request) -> web.Response:
    service = request.app[SCRAPE_SERVICE]
    return web.json_response(await service.status())


def create_app(service: ScrapeService) -> web.Application:
    app = web.Application()
    app[SCRAPE_SERVICE] = service
    app.add_routes(routes)
    return app
