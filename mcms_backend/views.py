from django.http import HttpResponse


def index(request):
    # Plain-text liveness banner
    return HttpResponse("MCMS Server Running", content_type="text/plain")
