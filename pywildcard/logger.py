#!/usr/bin/env python3

import datetime

def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)

class Logger(object):
    '''Collects what happens while patterns are compiled and matched.

    Everything is kept in 'raw_log'. Notices are also printed, to
    standard output unless set_outfile() gives another file.
    '''

    # Only the ordering of these is meaningful.
    LOG_DEBUG2 = -1 # Every match attempt
    LOG_DEBUG = 0 # Every compiled pattern
    LOG_NOTICE = 2 # The pattern probably does not mean what it says

    severity_names = {
        LOG_DEBUG2: 'DBG2',
        LOG_DEBUG: 'DBG',
        LOG_NOTICE: 'NOTICE',
        }

    def __init__(self, services=None):
        self.raw_log = []
        self._utcnow = _utcnow
        if services is not None and 'utcnow' in services:
            self._utcnow = services['utcnow']
        self._outfile = None

    def set_outfile(self, outfile):
        self._outfile = outfile

    def log(self, severity, what, which, comment=''):
        '''Add an event to the log.

        'what' names the kind of event, 'which' is the pattern (or the
        part of it) the event is about, and 'comment' says where in it.
        '''
        item = LogItem(self._utcnow(), severity, what, which, comment)
        self.raw_log.append(item)
        if severity >= self.LOG_NOTICE:
            print(item.message(), file=self._outfile)

    def log_notice(self, what, which, comment=''):
        self.log(self.LOG_NOTICE, what, which, comment)

    def items_with_severity(self, severity):
        return [x for x in self.raw_log if x.severity >= severity]

class LogItem(object):
    def __init__(self, when, severity, what, which, comment):
        self.when = when
        self.severity = severity
        self.what = what
        self.which = which
        self.comment = comment

    def __str__(self):
        string = self.what + ' - ' + repr(self.which)
        if self.comment:
            string += ': ' + self.comment
        return string

    def message(self):
        return (str(self.when) + ' ' + Logger.severity_names[self.severity] +
                ': ' + str(self))

class NoLogger(object):
    def log(self, severity, what, which, comment=''):
        pass

    def log_notice(self, what, which, comment=''):
        pass

def get_logger(services):
    if services is not None and 'logger' in services:
        return services['logger']
    return NoLogger()
