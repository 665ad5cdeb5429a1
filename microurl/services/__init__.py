from microurl.services.micro_url_service import MicroUrlService


__all__ = ['MicroUrlService']
