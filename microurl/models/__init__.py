from microurl.models.url_record_model import UrlRecord


__all__ = ['UrlRecord']
